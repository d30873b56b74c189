"""Normal random-coefficient distributions.

Parameter layouts (K = number of attributes):

- ``DiagonalGaussianDistribution``: ``[mu (K), log_sigma (K)]``;
  standard deviations enter through ``exp`` so that any real vector is valid.
- ``GaussianDistribution``: ``[mu (K), L (K(K+1)/2)]`` where ``L`` is the
  lower-triangular Cholesky factor of the coefficient covariance
  ``Omega = L L'``, stored row by row.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymixlogit.distribution._base import Distribution


class DiagonalGaussianDistribution(Distribution):
    """Independent normal coefficients."""

    def num_parameters(self) -> int:
        return 2 * self.num_attributes

    def _draw(self, parameters: NDArray, z: NDArray) -> NDArray:
        K = self.num_attributes
        mu = parameters[:K]
        sigma = np.exp(parameters[K:])
        return mu + sigma * z

    def covariance(self, parameters: ArrayLike) -> NDArray:
        """Coefficient covariance matrix ``diag(exp(2 * log_sigma))``."""
        parameters = np.asarray(parameters, dtype=np.float64)
        K = self.num_attributes
        return np.diag(np.exp(2.0 * parameters[K:2 * K]))


class GaussianDistribution(Distribution):
    """Correlated normal coefficients with a Cholesky-parametrized covariance."""

    def num_parameters(self) -> int:
        K = self.num_attributes
        return K + K * (K + 1) // 2

    def cholesky(self, parameters: ArrayLike) -> NDArray:
        """Build the Cholesky factor L of Omega = LL'."""
        parameters = np.asarray(parameters, dtype=np.float64)
        K = self.num_attributes
        L = np.zeros((K, K), dtype=np.float64)
        L[np.tril_indices(K)] = parameters[K:K + K * (K + 1) // 2]
        return L

    def covariance(self, parameters: ArrayLike) -> NDArray:
        L = self.cholesky(parameters)
        return L @ L.T

    def _draw(self, parameters: NDArray, z: NDArray) -> NDArray:
        mu = parameters[:self.num_attributes]
        return mu + self.cholesky(parameters) @ z
