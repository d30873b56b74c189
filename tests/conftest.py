"""Shared test fixtures for pymixlogit."""

from __future__ import annotations

import numpy as np
import pytest

from pymixlogit.dcm import DCMTable
from pymixlogit.table import Table


@pytest.fixture
def two_person_tables():
    """Raw tables for two people with 2 and 3 alternatives.

    Person 0: [1,0], [0,1], chose alternative 1 (1-based).
    Person 1: [1,1], [0,0], [2,0], chose alternative 3 (1-based).
    """
    attributes = Table.from_rows([[1.0, 0.0],
                                  [0.0, 1.0],
                                  [1.0, 1.0],
                                  [0.0, 0.0],
                                  [2.0, 0.0]])
    decisions = Table.from_rows([1, 3])
    num_alternatives = Table.from_rows([2, 3])
    return attributes, decisions, num_alternatives


@pytest.fixture
def two_person_table(two_person_tables):
    """Indexed DCM table for the two-person example."""
    attributes, decisions, num_alternatives = two_person_tables
    return DCMTable(attributes, [2], decisions, num_alternatives, rng=0)


@pytest.fixture
def rng():
    return np.random.default_rng(12345)

