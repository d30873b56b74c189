"""Column-oriented numeric table.

Each entry (point) of the table is one column of a ``(n_attributes,
n_entries)`` float64 matrix, so that the attributes of one entry are
contiguous in memory. On disk a table is one entry per line.
"""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pandas as pd
from numpy.typing import ArrayLike, NDArray

from pymixlogit.utils._validation import check_2d


class Table:
    """Column-oriented matrix of real-valued entries.

    Parameters
    ----------
    data : array-like, shape (n_attributes, n_entries)
        Column-oriented data, always copied into a float64 Fortran-ordered
        array owned by the table.

    Examples
    --------
    >>> t = Table.from_rows([[1.0, 0.0], [0.0, 1.0], [2.0, 0.0]])
    >>> t.n_entries, t.n_attributes
    (3, 2)
    >>> t.get(2)
    array([2., 0.])
    """

    def __init__(self, data: ArrayLike):
        data = np.array(data, dtype=np.float64, order="F")
        check_2d(data, "data")
        self._data = data

    @classmethod
    def from_rows(cls, rows: ArrayLike) -> "Table":
        """Build a table from an entry-per-row array (the on-disk layout)."""
        rows = np.asarray(rows, dtype=np.float64)
        if rows.ndim == 1:
            rows = rows[:, np.newaxis]
        check_2d(rows, "rows")
        return cls(rows.T)

    @classmethod
    def from_frame(cls, df: pd.DataFrame) -> "Table":
        """Build a table from a DataFrame with one entry per row."""
        return cls.from_rows(df.to_numpy(dtype=np.float64))

    @classmethod
    def zeros(cls, n_attributes: int, n_entries: int) -> "Table":
        """Allocate a zero-filled table."""
        return cls(np.zeros((n_attributes, n_entries), order="F"))

    @classmethod
    def load(cls, path: str | Path, *, file_type: str | None = None) -> "Table":
        """Load a table written by :meth:`save` (or any numeric CSV/DAT file)."""
        from pymixlogit.io._data_loader import load_table
        return load_table(path, file_type=file_type)

    @property
    def data(self) -> NDArray:
        """The underlying ``(n_attributes, n_entries)`` matrix."""
        return self._data

    @property
    def n_entries(self) -> int:
        return self._data.shape[1]

    @property
    def n_attributes(self) -> int:
        return self._data.shape[0]

    def get(self, row: int) -> NDArray:
        """Return entry ``row`` as a 1-D view (writes go through to the table)."""
        return self._data[:, row]

    def copy(self) -> "Table":
        return Table(self._data)

    def to_frame(self) -> pd.DataFrame:
        """Entry-per-row DataFrame view of the table."""
        return pd.DataFrame(self._data.T)

    def save(self, path: str | Path) -> None:
        """Write the table as headerless CSV, one entry per line."""
        self.to_frame().to_csv(path, header=False, index=False, float_format="%.17g")

    def __len__(self) -> int:
        return self.n_entries

    def __repr__(self) -> str:
        return f"Table(n_attributes={self.n_attributes}, n_entries={self.n_entries})"
