"""Quasi-Monte Carlo draws for simulated likelihood estimation."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray
from scipy.stats import norm, qmc


def halton_sequence(n: int, d: int, seed: int | None = None, *, skip: int = 0) -> NDArray:
    """Generate a scrambled Halton sequence.

    Parameters
    ----------
    n : int
        Number of points returned.
    d : int
        Dimensionality.
    seed : int or None
        Random seed for scrambling.
    skip : int
        Number of leading points discarded before the returned block.

    Returns
    -------
    points : (n, d) array
        Halton points in [0, 1]^d.
    """
    if n < 1 or d < 1:
        raise ValueError(f"n and d must be >= 1, got n={n}, d={d}")
    if skip < 0:
        raise ValueError(f"skip must be >= 0, got {skip}")
    sampler = qmc.Halton(d=d, scramble=True, seed=seed)
    if skip:
        sampler.fast_forward(skip)
    return sampler.random(n)


def halton_normal(n: int, d: int, seed: int | None = None, *, skip: int = 0) -> NDArray:
    """Standard normal draws from a Halton sequence via the inverse CDF.

    Each row is one draw of the ``d`` standard normal variates that a
    ``Distribution`` maps to a coefficient vector.
    """
    u = halton_sequence(n, d, seed=seed, skip=skip)
    u = np.clip(u, 1e-10, 1.0 - 1e-10)
    return norm.ppf(u)
