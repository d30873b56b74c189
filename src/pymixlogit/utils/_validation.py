"""Input validation utilities."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


def check_1d(a: NDArray, name: str = "a") -> None:
    """Raise ValueError if a is not 1-dimensional."""
    if a.ndim != 1:
        raise ValueError(f"{name} must be 1-dimensional, got shape {a.shape}")


def check_2d(A: NDArray, name: str = "A") -> None:
    """Raise ValueError if A is not 2-dimensional."""
    if A.ndim != 2:
        raise ValueError(f"{name} must be 2-dimensional, got shape {A.shape}")


def check_length(a: NDArray, n: int, name: str = "a") -> None:
    """Raise ValueError if the 1-D array a does not have n entries."""
    check_1d(a, name)
    if a.shape[0] != n:
        raise ValueError(f"{name} must have length {n}, got {a.shape[0]}")


def is_integral(a: NDArray) -> bool:
    """Check if every entry of a is a finite whole number."""
    a = np.asarray(a, dtype=np.float64)
    return bool(np.all(np.isfinite(a)) and np.all(a == np.round(a)))
