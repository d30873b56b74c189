"""Random generator management for reproducibility."""

from __future__ import annotations

import numpy as np


def as_generator(seed: int | np.random.Generator | None = None) -> np.random.Generator:
    """Return a NumPy random generator for the given seed.

    Parameters
    ----------
    seed : int, Generator or None
        An existing generator is returned unchanged so that callers can
        share one stream across several consumers. An integer seeds a new
        generator; None draws fresh entropy from the OS.

    Returns
    -------
    rng : np.random.Generator
    """
    if isinstance(seed, np.random.Generator):
        return seed
    return np.random.default_rng(seed)
