"""Tests for random-coefficient distributions."""

from __future__ import annotations

import numpy as np
import pytest

from pymixlogit.distribution import (
    ConstantDistribution,
    DiagonalGaussianDistribution,
    GaussianDistribution,
)


class TestInit:
    def test_num_attributes_is_sum_of_dimensions(self):
        d = ConstantDistribution()
        d.init([2, 3])
        assert d.num_attributes == 5
        assert d.attribute_dimensions == (2, 3)

    @pytest.mark.parametrize("dims", [[], [0], [2, -1]])
    def test_invalid_dimensions(self, dims):
        with pytest.raises(ValueError):
            ConstantDistribution().init(dims)

    def test_fractional_dimension(self):
        with pytest.raises(ValueError, match="integers"):
            ConstantDistribution().init([1.5])

    def test_draw_before_init(self):
        with pytest.raises(RuntimeError, match="not initialized"):
            ConstantDistribution().draw_beta([], [])


class TestNumParameters:
    @pytest.mark.parametrize(
        "cls, expected",
        [
            (ConstantDistribution, 3),
            (DiagonalGaussianDistribution, 6),
            (GaussianDistribution, 3 + 6),
        ],
    )
    def test_counts(self, cls, expected):
        d = cls()
        d.init([3])
        assert d.num_parameters() == expected


class TestDrawBeta:
    def test_constant_ignores_draw(self):
        d = ConstantDistribution()
        d.init([2])
        np.testing.assert_array_equal(d.draw_beta([0.5, -1.0], [3.0, 4.0]), [0.5, -1.0])

    def test_zero_draw_gives_mean(self):
        d = GaussianDistribution()
        d.init([2])
        theta = np.array([1.0, -2.0, 0.5, 0.3, 0.7])
        np.testing.assert_array_equal(d.mean(theta), [1.0, -2.0])

    def test_diagonal(self):
        d = DiagonalGaussianDistribution()
        d.init([1, 1])
        theta = np.array([1.0, 2.0, np.log(0.5), np.log(3.0)])
        beta = d.draw_beta(theta, [2.0, -1.0])
        np.testing.assert_allclose(beta, [1.0 + 0.5 * 2.0, 2.0 - 3.0])

    def test_diagonal_covariance(self):
        d = DiagonalGaussianDistribution()
        d.init([2])
        cov = d.covariance([0.0, 0.0, np.log(2.0), 0.0])
        np.testing.assert_allclose(cov, np.diag([4.0, 1.0]))

    def test_cholesky_layout(self):
        d = GaussianDistribution()
        d.init([3])
        theta = np.concatenate([np.zeros(3), [1.0, 2.0, 3.0, 4.0, 5.0, 6.0]])
        L = d.cholesky(theta)
        expected = np.array([[1.0, 0.0, 0.0],
                             [2.0, 3.0, 0.0],
                             [4.0, 5.0, 6.0]])
        np.testing.assert_array_equal(L, expected)
        np.testing.assert_array_equal(d.covariance(theta), expected @ expected.T)

    def test_gaussian_draw(self):
        d = GaussianDistribution()
        d.init([2])
        theta = np.array([1.0, 1.0, 2.0, 0.5, 1.0])
        z = np.array([1.0, -1.0])
        L = np.array([[2.0, 0.0], [0.5, 1.0]])
        np.testing.assert_allclose(d.draw_beta(theta, z), [1.0, 1.0] + L @ z)

    def test_sample_moments(self):
        d = GaussianDistribution()
        d.init([2])
        theta = np.array([0.5, -0.5, 1.0, 0.6, 0.8])
        z = np.random.default_rng(0).standard_normal((20000, 2))
        betas = np.array([d.draw_beta(theta, zi) for zi in z])
        np.testing.assert_allclose(betas.mean(axis=0), [0.5, -0.5], atol=0.03)
        np.testing.assert_allclose(np.cov(betas.T), d.covariance(theta), atol=0.05)

    def test_wrong_parameter_length(self):
        d = DiagonalGaussianDistribution()
        d.init([2])
        with pytest.raises(ValueError, match="parameters must have length 4"):
            d.draw_beta([0.0, 0.0], [0.0, 0.0])

    def test_wrong_draw_length(self):
        d = ConstantDistribution()
        d.init([2])
        with pytest.raises(ValueError, match="standard_draw must have length 2"):
            d.draw_beta([0.0, 0.0], [0.0])
