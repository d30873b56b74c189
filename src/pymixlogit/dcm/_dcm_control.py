"""DCM table control structure.

This dataclass configures how a ``DCMTable`` is indexed and how its choice
probabilities are evaluated.
"""

from __future__ import annotations

from dataclasses import dataclass

# Added to every max-shifted utility before exponentiation; keeps every
# exponent in (-inf, 1]. Cancels in the normalization.
UTILITY_SHIFT = 1.0


@dataclass
class DCMControl:
    """Control structure for DCM table construction.

    Attributes
    ----------
    utility_shift : float
        Constant added to ``score - max(score)`` before ``exp``.
    seed : int or None
        Seed for the shuffled person order when no generator is passed
        to the table. None gives a different order on every load.
    verbose : int
        Verbosity: 0=silent, 1=print the table summary after loading.
    """

    utility_shift: float = UTILITY_SHIFT
    seed: int | None = None
    verbose: int = 0
