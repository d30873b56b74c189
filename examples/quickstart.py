"""Example: build a DCM table from raw tables and evaluate MNL probabilities.

Two people with ragged choice sets:

- person 0 chooses between [1, 0] and [0, 1] and picks alternative 1
- person 1 chooses between [1, 1], [0, 0] and [2, 0] and picks alternative 3

Decisions are 1-based on input and stored 0-based.
"""

import logging
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

import numpy as np

from pymixlogit import DCMTable, Table
from pymixlogit.utils import log_to_stream

log_to_stream(logging.INFO)
logging.getLogger("pymixlogit").setLevel(logging.INFO)

attributes = Table.from_rows([[1, 0], [0, 1], [1, 1], [0, 0], [2, 0]])
decisions = Table.from_rows([1, 3])
num_alternatives = Table.from_rows([2, 3])

table = DCMTable(attributes, [2], decisions, num_alternatives, rng=42)
table.summary()

beta = np.array([1.0, 0.0])
for person in range(table.num_people):
    probs = table.choice_probabilities(person, beta)
    print(f"\nPerson {person}: probabilities {np.array2string(probs, precision=4)}")
    print(f"  chosen alternative {table.get_discrete_choice_index(person)} "
          f"with probability {table.choice_probability(person, beta):.4f}")

print("\nPer-person index:")
print(table.to_dataframe())
