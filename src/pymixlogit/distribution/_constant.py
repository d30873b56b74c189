"""Degenerate distribution: every draw is the parameter vector itself."""

from __future__ import annotations

from numpy.typing import NDArray

from pymixlogit.distribution._base import Distribution


class ConstantDistribution(Distribution):
    """Fixed coefficients; reduces the mixed logit to a plain MNL."""

    def num_parameters(self) -> int:
        return self.num_attributes

    def _draw(self, parameters: NDArray, z: NDArray) -> NDArray:
        return parameters.copy()
