"""DCM table: per-person discrete choices with their attribute vectors.

The attributes of every (person, alternative) pair live in one flat,
column-oriented table, with each person's alternatives contiguous. A
prefix sum over the per-person alternative counts gives the column at
which each person's block starts, so that

    column(person, alternative) = cumulative_offsets[person] + alternative

is an O(1) lookup. On top of this layout the table evaluates closed-form
multinomial-logit choice probabilities for a coefficient draw beta, the
quantity averaged over draws by a simulated maximum-likelihood estimator.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

import numpy as np
import pandas as pd
from numpy.typing import ArrayLike, NDArray

from pymixlogit.dcm._dcm_control import DCMControl
from pymixlogit.dcm._errors import InconsistentTableError
from pymixlogit.distribution._base import Distribution
from pymixlogit.distribution._constant import ConstantDistribution
from pymixlogit.io._data_loader import load_table
from pymixlogit.table._table import Table
from pymixlogit.utils._logutil import log_start_finish
from pymixlogit.utils._seeds import as_generator
from pymixlogit.utils._validation import is_integral

logger = logging.getLogger(__name__)


def _read_only(a: NDArray) -> NDArray:
    a.setflags(write=False)
    return a


class DCMTable:
    """Discrete choice data for a mixed logit model.

    Construction indexes and validates the three raw tables; the object is
    read-only afterwards, so probability evaluations may run concurrently
    from several threads.

    Parameters
    ----------
    attribute_table : Table
        One entry per (person, alternative) pair, grouped by person.
    attribute_dimensions : sequence of int
        Component-wise dimension of each attribute, passed to the
        distribution. Must sum to ``attribute_table.n_attributes``.
    decisions_table : Table
        One entry per person: the 1-based index of the chosen alternative.
    num_alternatives_table : Table
        One entry per person: the number of alternatives available.
    distribution : Distribution or None
        Distribution of the coefficient vector. Defaults to
        :class:`ConstantDistribution`. The table takes ownership and
        initializes it before cross-checking the tables, so it stays
        initialized with ``attribute_dimensions`` even if construction
        then fails.
    control : DCMControl or None
        Construction and evaluation options.
    rng : np.random.Generator, int or None
        Source of the shuffled person order. Overrides ``control.seed``.

    Raises
    ------
    InconsistentTableError
        If the tables disagree with each other (see ``_check_*`` methods).
    ValueError
        Propagated from ``distribution.init`` for invalid dimensions.

    Notes
    -----
    The data of the three tables is flagged read-only once construction
    succeeds, so that ``save`` always writes the indexed tables.

    Examples
    --------
    >>> attributes = Table.from_rows([[1, 0], [0, 1], [1, 1], [0, 0], [2, 0]])
    >>> decisions = Table.from_rows([1, 3])
    >>> n_alts = Table.from_rows([2, 3])
    >>> dcm = DCMTable(attributes, [2], decisions, n_alts, rng=0)
    >>> round(dcm.choice_probability(0, [1.0, 0.0]), 3)
    0.731
    """

    def __init__(
        self,
        attribute_table: Table,
        attribute_dimensions: Sequence[int],
        decisions_table: Table,
        num_alternatives_table: Table,
        *,
        distribution: Distribution | None = None,
        control: DCMControl | None = None,
        rng: np.random.Generator | int | None = None,
    ):
        self.control = control or DCMControl()

        self._attribute_table = attribute_table
        self._decisions_table = decisions_table
        self._num_alternatives_table = num_alternatives_table

        with log_start_finish("index DCM table", logger):
            self._check_person_counts()

            # Chosen alternatives, converted to 0-based indices.
            decisions = decisions_table.data[0]
            if not is_integral(decisions):
                raise InconsistentTableError("decisions table must hold whole-number indices")
            self._choices = _read_only(decisions.astype(np.int64) - 1)

            self._distribution = distribution if distribution is not None else ConstantDistribution()
            self._distribution.init(attribute_dimensions)
            self._attribute_dimensions = self._distribution.attribute_dimensions
            self._check_attribute_dimensions()

            rng = as_generator(rng if rng is not None else self.control.seed)
            self._shuffled_indices = _read_only(rng.permutation(self.num_people))

            self._num_alternatives = self._read_num_alternatives()
            self._cumulative_offsets = self._build_cumulative_offsets()
            self._check_total_attribute_count()
            self._check_choice_range()

            self._num_people_per_choice = _read_only(np.bincount(
                self._choices, minlength=int(self._num_alternatives.max())
            ))

            self._attributes = _read_only(attribute_table.data)
            _read_only(decisions_table.data)
            _read_only(num_alternatives_table.data)

        if self.control.verbose >= 1:
            self.summary()

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def load(
        cls,
        attribute_path: str | Path,
        decisions_path: str | Path,
        num_alternatives_path: str | Path,
        attribute_dimensions: Sequence[int] | None = None,
        **kwargs,
    ) -> "DCMTable":
        """Read the three tables from disk and index them.

        ``attribute_dimensions`` defaults to a single attribute block of
        ``n_attributes`` components. Keyword arguments are passed to the
        constructor.
        """
        attribute_table = load_table(attribute_path)
        decisions_table = load_table(decisions_path)
        num_alternatives_table = load_table(num_alternatives_path)
        if attribute_dimensions is None:
            attribute_dimensions = [attribute_table.n_attributes]
        return cls(
            attribute_table, attribute_dimensions,
            decisions_table, num_alternatives_table, **kwargs,
        )

    def save(
        self,
        attribute_path: str | Path,
        decisions_path: str | Path,
        num_alternatives_path: str | Path,
    ) -> None:
        """Write the three tables; decisions keep their 1-based form."""
        self._attribute_table.save(attribute_path)
        self._decisions_table.save(decisions_path)
        self._num_alternatives_table.save(num_alternatives_path)
        logger.debug("saved DCM table to %s, %s, %s",
                     attribute_path, decisions_path, num_alternatives_path)

    def _check_person_counts(self) -> None:
        for name, table in (("decisions", self._decisions_table),
                            ("number of alternatives", self._num_alternatives_table)):
            if table.n_attributes < 1:
                raise InconsistentTableError(f"{name} table has no columns")
        n_decisions = self._decisions_table.n_entries
        n_alternatives = self._num_alternatives_table.n_entries
        if n_decisions != n_alternatives:
            raise InconsistentTableError(
                f"decisions table has {n_decisions} entries but the number of "
                f"alternatives table has {n_alternatives}"
            )
        if n_decisions == 0:
            raise InconsistentTableError("DCM table needs at least one person")

    def _check_attribute_dimensions(self) -> None:
        n_attributes = self._attribute_table.n_attributes
        if self._distribution.num_attributes != n_attributes:
            raise InconsistentTableError(
                f"attribute dimensions {list(self._attribute_dimensions)} sum to "
                f"{self._distribution.num_attributes}, but the attribute table has "
                f"{n_attributes} attributes"
            )

    def _read_num_alternatives(self) -> NDArray:
        counts = self._num_alternatives_table.data[0]
        if not is_integral(counts):
            raise InconsistentTableError("number of alternatives must be whole numbers")
        counts = counts.astype(np.int64)
        if counts.min() < 1:
            bad = np.flatnonzero(counts < 1)
            raise InconsistentTableError(
                f"every person needs at least one alternative; people without: {bad[:10]}"
            )
        return _read_only(counts)

    def _build_cumulative_offsets(self) -> NDArray:
        offsets = np.zeros(self.num_people, dtype=np.int64)
        np.cumsum(self._num_alternatives[:-1], out=offsets[1:])
        return _read_only(offsets)

    def _check_total_attribute_count(self) -> None:
        total = int(self._cumulative_offsets[-1] + self._num_alternatives[-1])
        n_entries = self._attribute_table.n_entries
        if total != n_entries:
            logger.error(
                "cumulative number of discrete choices (%d) does not equal the "
                "number of attribute vectors (%d)", total, n_entries,
            )
            raise InconsistentTableError(
                f"The cumulative number of discrete choices ({total}) does not equal "
                f"the total number of attribute vectors ({n_entries})."
            )
        logger.info("cumulative number of discrete choices: %d", total)

    def _check_choice_range(self) -> None:
        bad = np.flatnonzero(
            (self._choices < 0) | (self._choices >= self._num_alternatives)
        )
        if bad.size:
            raise InconsistentTableError(
                f"chosen alternative out of range for people {bad[:10]}"
                + ("..." if bad.size > 10 else "")
                + "; decisions must be 1-based indices into each choice set"
            )

    # ------------------------------------------------------------------
    # Choice probabilities
    # ------------------------------------------------------------------

    def get_attribute_vector(self, person_index: int, discrete_choice_index: int) -> NDArray:
        """Attribute vector of one alternative of one person.

        No bounds checking: ``discrete_choice_index`` must be below
        ``num_discrete_choices(person_index)``.
        """
        index = self._cumulative_offsets[person_index] + discrete_choice_index
        return self._attributes[:, index]

    def attribute_block(self, person_index: int) -> NDArray:
        """All attribute vectors of a person, shape (n_attributes, n_alternatives)."""
        start = self._cumulative_offsets[person_index]
        return self._attributes[:, start:start + self._num_alternatives[person_index]]

    def choice_probabilities(self, person_index: int, beta: ArrayLike) -> NDArray:
        """MNL probabilities of every alternative of a person for one beta.

        Utilities are shifted by their maximum (plus
        ``control.utility_shift``) before exponentiation so that no
        exponent exceeds the shift, which rules out overflow. Scores must
        themselves be finite: if ``beta @ x`` overflows to inf the
        probabilities come out NaN.

        Parameters
        ----------
        person_index : int
        beta : array-like, shape (n_attributes,)

        Returns
        -------
        probabilities : ndarray, shape (num_discrete_choices(person_index),)
        """
        scores = np.asarray(beta, dtype=np.float64) @ self.attribute_block(person_index)
        weights = np.exp(scores - scores.max() + self.control.utility_shift)
        return weights / weights.sum()

    def choice_probability(self, person_index: int, beta: ArrayLike) -> float:
        """Probability of the alternative the person actually chose."""
        probabilities = self.choice_probabilities(person_index, beta)
        return float(probabilities[self._choices[person_index]])

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def distribution(self) -> Distribution:
        """The distribution from which each beta is drawn."""
        return self._distribution

    @property
    def attribute_dimensions(self) -> tuple[int, ...]:
        return self._attribute_dimensions

    @property
    def num_people(self) -> int:
        return self._decisions_table.n_entries

    @property
    def num_attributes(self) -> int:
        return self._attribute_table.n_attributes

    @property
    def num_parameters(self) -> int:
        return self._distribution.num_parameters()

    @property
    def total_num_discrete_choices(self) -> int:
        """Number of attribute vectors over all people."""
        return self._attribute_table.n_entries

    @property
    def num_choice_buckets(self) -> int:
        """Largest choice-set size; the length of the per-choice counts."""
        return len(self._num_people_per_choice)

    @property
    def cumulative_offsets(self) -> NDArray:
        """Column at which each person's alternatives start (read-only)."""
        return self._cumulative_offsets

    @property
    def shuffled_person_order(self) -> NDArray:
        """Random permutation of person indices drawn at load (read-only)."""
        return self._shuffled_indices

    def num_discrete_choices(self, person_index: int) -> int:
        return int(self._num_alternatives[person_index])

    def get_discrete_choice_index(self, person_index: int) -> int:
        """0-based index of the alternative the person chose."""
        return int(self._choices[person_index])

    def num_people_per_discrete_choice(self, discrete_choice_index: int) -> int:
        """Number of people whose chosen index equals ``discrete_choice_index``.

        Buckets are shared across people with choice sets of different
        sizes: bucket ``k`` mixes the ``k``-th alternative of every person
        offering at least ``k + 1`` alternatives.
        """
        return int(self._num_people_per_choice[discrete_choice_index])

    def shuffled_index_for_person(self, pos: int) -> int:
        """Real person index of the ``pos``-th person in the shuffled order."""
        return int(self._shuffled_indices[pos])

    # ------------------------------------------------------------------
    # Reporting
    # ------------------------------------------------------------------

    def to_dataframe(self) -> pd.DataFrame:
        """Per-person index: offset, choice-set size and chosen alternative."""
        return pd.DataFrame(
            {
                "offset": self._cumulative_offsets,
                "num_alternatives": self._num_alternatives,
                "chosen_index": self._choices,
            },
            index=pd.RangeIndex(self.num_people, name="person"),
        )

    def summary(self) -> str:
        """Print a formatted description of the table.

        Returns
        -------
        text : str
            Formatted summary string.
        """
        lines = []
        sep = "=" * 60

        lines.append(sep)
        lines.append("  pymixlogit DCM Table")
        lines.append(sep)
        lines.append(f"  Number of people             {self.num_people:>10d}")
        lines.append(f"  Number of attributes         {self.num_attributes:>10d}")
        lines.append(f"  Attribute dimensions         {str(list(self.attribute_dimensions)):>10s}")
        lines.append(f"  Total discrete choices       {self.total_num_discrete_choices:>10d}")
        lines.append(f"  Largest choice set           {self.num_choice_buckets:>10d}")
        lines.append(f"  Distribution                 {type(self._distribution).__name__:>10s}")
        lines.append(f"  Number of parameters         {self.num_parameters:>10d}")
        lines.append("")
        lines.append(f"  {'Choice index':<14s} {'People':>10s} {'Share':>10s}")
        lines.append("  " + "-" * 36)
        for k, count in enumerate(self._num_people_per_choice):
            lines.append(f"  {k:<14d} {count:>10d} {count / self.num_people:>10.4f}")
        lines.append(sep)

        text = "\n".join(lines)
        print(text)
        return text

    def __repr__(self) -> str:
        return (
            f"DCMTable(num_people={self.num_people}, num_attributes={self.num_attributes}, "
            f"total_num_discrete_choices={self.total_num_discrete_choices})"
        )
