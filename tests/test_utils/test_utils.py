"""Tests for utility helpers."""

from __future__ import annotations

import logging

import numpy as np
import pytest

from pymixlogit.utils import (
    as_generator,
    check_length,
    halton_normal,
    halton_sequence,
    is_integral,
    log_start_finish,
    log_to_stream,
    set_log_level,
)


class TestSeeds:
    def test_generator_passthrough(self):
        rng = np.random.default_rng(0)
        assert as_generator(rng) is rng

    def test_int_seed_is_reproducible(self):
        a = as_generator(42).permutation(10)
        b = as_generator(42).permutation(10)
        np.testing.assert_array_equal(a, b)

    def test_none_gives_generator(self):
        assert isinstance(as_generator(None), np.random.Generator)


class TestValidation:
    def test_check_length(self):
        check_length(np.zeros(3), 3)
        with pytest.raises(ValueError, match="must have length 2"):
            check_length(np.zeros(3), 2, "beta")
        with pytest.raises(ValueError, match="1-dimensional"):
            check_length(np.zeros((3, 1)), 3)

    def test_is_integral(self):
        assert is_integral(np.array([1.0, 2.0, 3.0]))
        assert not is_integral(np.array([1.0, 2.5]))
        assert not is_integral(np.array([np.nan]))


class TestQMC:
    def test_halton_in_unit_cube(self):
        u = halton_sequence(100, 3, seed=0)
        assert u.shape == (100, 3)
        assert np.all((u >= 0.0) & (u <= 1.0))

    def test_skip_discards_leading_points(self):
        full = halton_sequence(20, 2, seed=4)
        tail = halton_sequence(10, 2, seed=4, skip=10)
        np.testing.assert_allclose(tail, full[10:])

    def test_normal_draws_are_finite(self):
        z = halton_normal(256, 2, seed=1)
        assert np.all(np.isfinite(z))
        assert abs(z.mean()) < 0.1
        assert abs(z.std() - 1.0) < 0.1

    @pytest.mark.parametrize("n, d, skip", [(0, 2, 0), (5, 0, 0), (5, 2, -1)])
    def test_invalid(self, n, d, skip):
        with pytest.raises(ValueError):
            halton_sequence(n, d, skip=skip)


class TestLogging:
    def test_log_start_finish(self, caplog):
        logger = logging.getLogger("pymixlogit.test")
        with caplog.at_level(logging.DEBUG, logger="pymixlogit"):
            with log_start_finish("work", logger):
                pass
        assert [r.getMessage() for r in caplog.records] == ["start: work", "finish: work"]

    def test_set_log_level(self):
        root = logging.getLogger("pymixlogit")
        old = root.level
        try:
            set_log_level(logging.WARNING)
            assert root.level == logging.WARNING
        finally:
            root.setLevel(old)

    def test_log_to_stream(self):
        root = logging.getLogger("pymixlogit")
        handler = log_to_stream(logging.INFO)
        try:
            assert handler in root.handlers
            assert handler.level == logging.INFO
        finally:
            root.removeHandler(handler)
