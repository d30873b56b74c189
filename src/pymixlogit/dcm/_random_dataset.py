"""Random DCM datasets for tests and examples."""

from __future__ import annotations

import logging
from collections.abc import Sequence

import numpy as np

from pymixlogit.dcm._dcm_table import DCMTable
from pymixlogit.table._table import Table
from pymixlogit.utils._seeds import as_generator

logger = logging.getLogger(__name__)


def generate_random_dataset(
    num_people: int,
    num_attributes: int,
    attribute_dimensions: Sequence[int] | None = None,
    *,
    min_alternatives: int = 3,
    max_alternatives: int = 7,
    rng: np.random.Generator | int | None = None,
    **kwargs,
) -> DCMTable:
    """Generate a random DCM table.

    Every person gets a choice set of ``min_alternatives`` up to (but
    excluding) ``max_alternatives`` alternatives, attributes uniform in
    [0.1, 1.0), and a uniformly chosen alternative.

    Parameters
    ----------
    num_people : int
        Number of people.
    num_attributes : int
        Number of attributes per alternative.
    attribute_dimensions : sequence of int or None
        Passed to the distribution. Defaults to ``[num_attributes]``.
    min_alternatives, max_alternatives : int
        Half-open range of choice-set sizes.
    rng : np.random.Generator, int or None
        Random source for the data and for the table's shuffled order.
    **kwargs
        Passed to :class:`DCMTable` (``distribution``, ``control``).

    Returns
    -------
    table : DCMTable
    """
    if num_people < 1:
        raise ValueError(f"num_people must be >= 1, got {num_people}")
    if num_attributes < 1:
        raise ValueError(f"num_attributes must be >= 1, got {num_attributes}")
    if not 1 <= min_alternatives < max_alternatives:
        raise ValueError(
            f"need 1 <= min_alternatives < max_alternatives, got "
            f"{min_alternatives} and {max_alternatives}"
        )
    if attribute_dimensions is None:
        attribute_dimensions = [num_attributes]

    rng = as_generator(rng)

    num_discrete_choices = rng.integers(min_alternatives, max_alternatives, size=num_people)
    total_num_discrete_choices = int(num_discrete_choices.sum())

    attributes = rng.uniform(0.1, 1.0, size=(num_attributes, total_num_discrete_choices))
    # 1-based, as read from disk
    decisions = rng.integers(0, num_discrete_choices) + 1

    logger.debug(
        "generated %d people with %d attribute vectors", num_people, total_num_discrete_choices
    )
    return DCMTable(
        Table(attributes),
        attribute_dimensions,
        Table.from_rows(decisions),
        Table.from_rows(num_discrete_choices),
        rng=rng,
        **kwargs,
    )
