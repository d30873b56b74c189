"""Base class for random-coefficient distributions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymixlogit.utils._validation import check_length


class Distribution(ABC):
    """Distribution from which each coefficient vector beta is drawn.

    A distribution is configured once with :meth:`init` and is read-only
    afterwards. Sampling itself is reparametrized: the caller supplies a
    standard normal vector ``z`` and :meth:`draw_beta` maps the parameter
    vector and ``z`` to a coefficient vector of length ``num_attributes``.
    """

    def __init__(self) -> None:
        self.attribute_dimensions: tuple[int, ...] = ()
        self.num_attributes = 0

    def init(self, attribute_dimensions: Sequence[int]) -> None:
        """Configure the distribution for the given attribute layout.

        Parameters
        ----------
        attribute_dimensions : sequence of int
            Component-wise dimension of each attribute; the coefficient
            vector has ``sum(attribute_dimensions)`` entries.

        Raises
        ------
        ValueError
            If the sequence is empty or holds a non-positive dimension.
        """
        dims = tuple(int(d) for d in attribute_dimensions)
        if len(dims) == 0:
            raise ValueError("attribute_dimensions must not be empty")
        if any(d < 1 for d in dims):
            raise ValueError(f"attribute_dimensions must be positive, got {list(dims)}")
        if any(d != raw for d, raw in zip(dims, attribute_dimensions)):
            raise ValueError(
                f"attribute_dimensions must be integers, got {list(attribute_dimensions)}"
            )
        self.attribute_dimensions = dims
        self.num_attributes = sum(dims)

    @abstractmethod
    def num_parameters(self) -> int:
        """Length of the parameter vector accepted by :meth:`draw_beta`."""
        ...

    @abstractmethod
    def _draw(self, parameters: NDArray, z: NDArray) -> NDArray:
        ...

    def draw_beta(self, parameters: ArrayLike, standard_draw: ArrayLike) -> NDArray:
        """Map parameters and a standard normal draw to a coefficient vector.

        Parameters
        ----------
        parameters : array-like, shape (num_parameters,)
        standard_draw : array-like, shape (num_attributes,)

        Returns
        -------
        beta : ndarray, shape (num_attributes,)
        """
        if self.num_attributes == 0:
            raise RuntimeError(f"{type(self).__name__} is not initialized; call init() first")
        parameters = np.asarray(parameters, dtype=np.float64)
        z = np.asarray(standard_draw, dtype=np.float64)
        check_length(parameters, self.num_parameters(), "parameters")
        check_length(z, self.num_attributes, "standard_draw")
        return self._draw(parameters, z)

    def mean(self, parameters: ArrayLike) -> NDArray:
        """Mean coefficient vector for the given parameters."""
        return self.draw_beta(parameters, np.zeros(self.num_attributes))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(attribute_dimensions={list(self.attribute_dimensions)})"
