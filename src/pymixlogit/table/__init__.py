"""Column-oriented numeric tables."""

from pymixlogit.table._table import Table

__all__ = ["Table"]
