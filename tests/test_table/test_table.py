"""Tests for the column-oriented Table."""

from __future__ import annotations

import numpy as np
import pytest

from pymixlogit.table import Table


class TestConstruction:
    def test_from_rows_is_column_oriented(self):
        t = Table.from_rows([[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]])
        assert t.n_entries == 3
        assert t.n_attributes == 2
        np.testing.assert_array_equal(t.data, [[1.0, 3.0, 5.0], [2.0, 4.0, 6.0]])
        assert t.data.flags["F_CONTIGUOUS"]

    def test_from_rows_1d_is_single_attribute(self):
        t = Table.from_rows([4, 2, 7])
        assert t.n_attributes == 1
        assert t.n_entries == 3
        assert t.data.dtype == np.float64

    def test_from_rows_copies_input(self):
        rows = np.array([[1.0, 2.0], [3.0, 4.0]])
        t = Table.from_rows(rows)
        rows[1, 0] = -50.0
        np.testing.assert_array_equal(t.get(1), [3.0, 4.0])
        assert not np.shares_memory(t.data, rows)

    def test_zeros(self):
        t = Table.zeros(3, 5)
        assert (t.n_attributes, t.n_entries) == (3, 5)
        assert not t.data.any()

    def test_rejects_1d_data(self):
        with pytest.raises(ValueError, match="2-dimensional"):
            Table(np.arange(3.0))

    def test_len_and_repr(self):
        t = Table.zeros(2, 4)
        assert len(t) == 4
        assert repr(t) == "Table(n_attributes=2, n_entries=4)"


class TestAccess:
    def test_get_returns_entry(self):
        t = Table.from_rows([[1.0, 2.0], [3.0, 4.0]])
        np.testing.assert_array_equal(t.get(1), [3.0, 4.0])

    def test_get_is_a_view(self):
        t = Table.zeros(2, 3)
        point = t.get(2)
        point[0] = 9.0
        assert t.data[0, 2] == 9.0

    def test_copy_is_independent(self):
        t = Table.from_rows([[1.0], [2.0]])
        c = t.copy()
        c.get(0)[0] = -1.0
        assert t.get(0)[0] == 1.0

    def test_to_frame(self):
        t = Table.from_rows([[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]])
        df = t.to_frame()
        assert df.shape == (3, 2)
        assert df.iloc[2, 1] == 6.0


class TestSaveLoad:
    def test_round_trip(self, tmp_path):
        rows = np.array([[0.1, 1.0 / 3.0], [2.5, -7.0]])
        path = tmp_path / "table.csv"
        Table.from_rows(rows).save(path)
        loaded = Table.load(path)
        np.testing.assert_allclose(loaded.data, rows.T, rtol=1e-15)

    def test_file_has_one_entry_per_line(self, tmp_path):
        path = tmp_path / "counts.csv"
        Table.from_rows([2, 3, 4]).save(path)
        assert path.read_text().split() == ["2", "3", "4"]
