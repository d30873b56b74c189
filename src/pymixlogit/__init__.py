"""Data layer for mixed logit discrete choice models."""

from pymixlogit.dcm import DCMControl, DCMTable, InconsistentTableError, generate_random_dataset
from pymixlogit.table import Table

__version__ = "0.1.0"

__all__ = [
    "DCMControl",
    "DCMTable",
    "InconsistentTableError",
    "Table",
    "generate_random_dataset",
]
