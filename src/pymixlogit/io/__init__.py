"""Data loading."""

from pymixlogit.io._data_loader import load_frame, load_table

__all__ = ["load_frame", "load_table"]
