"""Data loading utilities."""

from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd

from pymixlogit.table._table import Table

logger = logging.getLogger(__name__)


def load_frame(path: str | Path, *, file_type: str | None = None) -> pd.DataFrame:
    """Load a headerless numeric file from CSV, DAT, or TXT.

    Parameters
    ----------
    path : str or Path
        Path to data file.
    file_type : str or None
        Force file type ("csv", "dat", "txt"). Auto-detected if None.

    Returns
    -------
    df : pd.DataFrame
        One row per table entry.
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Data file not found: {path}")

    if file_type is None:
        file_type = path.suffix.lower().lstrip(".")

    if file_type in ("dat", "txt"):
        # Whitespace-delimited first, then comma
        try:
            df = pd.read_csv(path, sep=r"\s+", header=None)
        except pd.errors.ParserError:
            df = pd.read_csv(path, header=None)
        if df.shape[1] == 1 and not pd.api.types.is_numeric_dtype(df.iloc[:, 0]):
            df = pd.read_csv(path, header=None)
    else:
        # Default to CSV
        df = pd.read_csv(path, header=None)

    logger.debug("loaded %s: %d rows x %d columns", path, df.shape[0], df.shape[1])
    return df


def load_table(path: str | Path, *, file_type: str | None = None) -> Table:
    """Load a numeric file into a column-oriented :class:`Table`.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist.
    ValueError
        If the file holds non-numeric values.
    """
    df = load_frame(path, file_type=file_type)
    try:
        return Table.from_frame(df)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Data file {path} is not numeric: {exc}") from exc
