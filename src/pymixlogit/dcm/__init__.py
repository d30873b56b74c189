"""Discrete choice model (DCM) table for the mixed logit."""

from pymixlogit.dcm._dcm_control import UTILITY_SHIFT, DCMControl
from pymixlogit.dcm._errors import InconsistentTableError
from pymixlogit.dcm._dcm_table import DCMTable
from pymixlogit.dcm._random_dataset import generate_random_dataset

__all__ = [
    "UTILITY_SHIFT",
    "DCMControl",
    "DCMTable",
    "InconsistentTableError",
    "generate_random_dataset",
]
