"""Random-coefficient distributions for the mixed logit."""

from pymixlogit.distribution._base import Distribution
from pymixlogit.distribution._constant import ConstantDistribution
from pymixlogit.distribution._gaussian import DiagonalGaussianDistribution, GaussianDistribution

__all__ = [
    "ConstantDistribution",
    "DiagonalGaussianDistribution",
    "Distribution",
    "GaussianDistribution",
]
