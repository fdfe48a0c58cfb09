"""Mean and median computed straight from a frequency table.

Neither function needs the raw samples: both walk the score domain once,
so cost depends on the domain size, not on how many lines were read.
"""

from __future__ import annotations

from src.scoring.table import FrequencyTable


def mean(table: FrequencyTable, total_valid: int) -> float | None:
    """``sum(score * count) / total_valid``; ``None`` when there is no data."""
    if total_valid <= 0:
        return None
    return table.weighted_sum() / total_valid


def median(table: FrequencyTable, total_valid: int) -> float | None:
    """Median of the *total_valid* samples summarised by *table*.

    Odd totals pick the score where the running count first reaches
    ``ceil(total / 2)``.  Even totals average the scores at ``total / 2``
    and ``total / 2 + 1``.  Returns ``None`` when there is no data.
    """
    if total_valid <= 0:
        return None

    half = total_valid // 2
    if total_valid % 2:
        lower_rank = upper_rank = half + 1
    else:
        lower_rank, upper_rank = half, half + 1

    lower: int | None = None
    running = 0
    for score, count in table.items():
        running += count
        if lower is None and running >= lower_rank:
            lower = score
        if running >= upper_rank:
            return (lower + score) / 2.0

    raise ValueError(
        f"total_valid={total_valid} exceeds the {running} samples in the table"
    )
