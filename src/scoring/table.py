"""Bounded-domain frequency table for anomaly scores."""

from __future__ import annotations

from collections.abc import Iterator

import numpy as np

from src.common.constants import MAX_SCORE


class FrequencyTable:
    """Occurrence counts for every score in ``0..max_score``.

    Scores above ``max_score`` land in the ``max_score`` bucket.  Missing
    (``None``) and negative scores are tallied in :attr:`invalid` instead of
    a bucket, so ``valid + invalid`` always equals the number of values
    passed to :meth:`increment`.

    Usage::

        table = FrequencyTable()
        table.increment(5)
        table.increment(None)
        table[5], table.invalid   # (1, 1)
    """

    def __init__(self, max_score: int = MAX_SCORE) -> None:
        if max_score < 0:
            raise ValueError(f"max_score must be >= 0, got {max_score}")
        self._max_score = max_score
        self._counts = np.zeros(max_score + 1, dtype=np.int64)
        self._invalid = 0

    @property
    def max_score(self) -> int:
        return self._max_score

    @property
    def invalid(self) -> int:
        return self._invalid

    @property
    def valid(self) -> int:
        """Number of values recorded in score buckets."""
        return int(self._counts.sum())

    @property
    def total(self) -> int:
        return self.valid + self._invalid

    @property
    def frozen(self) -> bool:
        return not self._counts.flags.writeable

    def freeze(self) -> None:
        """Make the table read-only; later increments raise RuntimeError."""
        self._counts.flags.writeable = False

    def increment(self, value: int | None) -> None:
        """Record one observation of *value*; out-of-range input never fails."""
        if self.frozen:
            raise RuntimeError("frequency table is frozen")
        if value is None or value < 0:
            self._invalid += 1
        elif value > self._max_score:
            self._counts[self._max_score] += 1
        else:
            self._counts[value] += 1

    def max_nonzero_index(self) -> int:
        """Largest score with a non-zero count, or 0 for an empty table."""
        nonzero = np.flatnonzero(self._counts)
        return int(nonzero[-1]) if nonzero.size else 0

    def items(self) -> Iterator[tuple[int, int]]:
        """Yield ``(score, count)`` for non-zero buckets in ascending order."""
        for score in np.flatnonzero(self._counts):
            yield int(score), int(self._counts[score])

    def weighted_sum(self) -> int:
        """``sum(score * count)`` over the whole domain."""
        scores = np.arange(self._max_score + 1, dtype=np.int64)
        return int(self._counts @ scores)

    def as_dict(self) -> dict[int, int]:
        return dict(self.items())

    def __getitem__(self, score: int) -> int:
        if not 0 <= score <= self._max_score:
            raise IndexError(f"score {score} outside 0..{self._max_score}")
        return int(self._counts[score])

    def __len__(self) -> int:
        return self._max_score + 1

    def __repr__(self) -> str:
        return (
            f"FrequencyTable(max_score={self._max_score}, "
            f"valid={self.valid}, invalid={self._invalid})"
        )
