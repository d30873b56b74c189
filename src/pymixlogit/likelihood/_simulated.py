"""Simulated likelihood of the mixed logit.

The mixed-logit probability of a person's observed choice is the MNL
probability integrated over the coefficient distribution. It is
approximated by averaging ``DCMTable.choice_probability`` over a set of
coefficient draws ``beta_r = distribution.draw_beta(theta, z_r)``:

    P_q(theta) ~= (1/R) * sum_r P_q(beta_r)

and the simulated log-likelihood sums ``log P_q`` over people.
"""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymixlogit.dcm._dcm_table import DCMTable
from pymixlogit.utils._qmc import halton_normal
from pymixlogit.utils._validation import check_2d

logger = logging.getLogger(__name__)

# Floor applied before taking logs
PROB_FLOOR = 1e-300


def standard_normal_draws(
    num_draws: int, num_attributes: int, seed: int | None = None, *, skip: int = 0
) -> NDArray:
    """Quasi-random standard normal draws, shape (num_draws, num_attributes)."""
    return halton_normal(num_draws, num_attributes, seed=seed, skip=skip)


def draw_betas(table: DCMTable, parameters: ArrayLike, draws: ArrayLike) -> NDArray:
    """Map every row of ``draws`` to a coefficient vector.

    Returns
    -------
    betas : ndarray, shape (n_draws, num_attributes)
    """
    draws = np.asarray(draws, dtype=np.float64)
    check_2d(draws, "draws")
    distribution = table.distribution
    return np.array([distribution.draw_beta(parameters, z) for z in draws])


def simulated_choice_probability(
    table: DCMTable, person_index: int, parameters: ArrayLike, draws: ArrayLike
) -> float:
    """Average probability of the person's chosen alternative over the draws."""
    betas = draw_betas(table, parameters, draws)
    return float(np.mean([table.choice_probability(person_index, b) for b in betas]))


def simulated_log_likelihood(
    table: DCMTable,
    parameters: ArrayLike,
    draws: ArrayLike,
    *,
    num_people: int | None = None,
) -> float:
    """Simulated log-likelihood over people.

    Parameters
    ----------
    table : DCMTable
    parameters : array-like, shape (table.num_parameters,)
        Distribution parameters theta.
    draws : array-like, shape (n_draws, table.num_attributes)
        Standard normal draws shared by all people.
    num_people : int or None
        If given, only the first ``num_people`` people of the table's
        shuffled order enter the sum (an unbiased subsample of the outer
        term). None uses every person.

    Returns
    -------
    ll : float
        Sum of ``log`` simulated probabilities.
    """
    if num_people is None:
        num_people = table.num_people
    if not 1 <= num_people <= table.num_people:
        raise ValueError(
            f"num_people must be in [1, {table.num_people}], got {num_people}"
        )

    betas = draw_betas(table, parameters, draws)

    total_ll = 0.0
    for pos in range(num_people):
        person = table.shuffled_index_for_person(pos)
        prob = np.mean([table.choice_probability(person, b) for b in betas])
        total_ll += np.log(max(prob, PROB_FLOOR))

    logger.debug(
        "simulated log-likelihood %.6f over %d people and %d draws",
        total_ll, num_people, len(betas),
    )
    return float(total_ll)
