"""Utility functions."""

from pymixlogit.utils._logutil import log_start_finish, log_to_stream, set_log_level
from pymixlogit.utils._qmc import halton_normal, halton_sequence
from pymixlogit.utils._seeds import as_generator
from pymixlogit.utils._validation import check_1d, check_2d, check_length, is_integral

__all__ = [
    "as_generator",
    "check_1d",
    "check_2d",
    "check_length",
    "halton_normal",
    "halton_sequence",
    "is_integral",
    "log_start_finish",
    "log_to_stream",
    "set_log_level",
]
