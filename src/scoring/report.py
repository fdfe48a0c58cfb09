"""Report generation: per-direction score tables plus mean / median."""

from __future__ import annotations

import json
import sys
from collections.abc import Iterator
from pathlib import Path
from typing import TextIO

import structlog

from src.common.console import bold, digit_width
from src.common.constants import DIRECTION_LABELS, MAX_SCORE, NO_DATA
from src.scoring.accumulator import AccumulationResult, ScoreAccumulator
from src.scoring.stats import mean, median
from src.scoring.table import FrequencyTable

# Widths of the three percentage columns ("100.0000%" needs 9)
_PCT_W, _CUM_W, _OUT_W = 9, 10, 11


def _pct(part: int, whole: int) -> float:
    return 100.0 * part / whole if whole else 0.0


def _fmt_stat(value: float | None) -> str:
    return NO_DATA if value is None else f"{value:.2f}"


def _row(
    label: str,
    count: int,
    pct: float,
    cumulative: float,
    label_w: int,
    count_w: int,
) -> str:
    return (
        f"{label:<{label_w}} | {count:>{count_w}} | "
        f"{pct:>{_PCT_W - 1}.4f}% | {cumulative:>{_CUM_W - 1}.4f}% | "
        f"{100.0 - cumulative:>{_OUT_W - 1}.4f}%"
    )


def format_section(direction: str, table: FrequencyTable, total: int) -> list[str]:
    """Render one direction: header, total, invalid, score rows, averages.

    Percentages are relative to *total* (every accepted line), and the
    cumulative column starts with the invalid row.
    """
    title, noun, col, total_noun = DIRECTION_LABELS[direction]
    score_w = digit_width(table.max_nonzero_index())
    prefix = f"{noun} with {direction} score of "
    label_w = len(prefix) + score_w
    count_w = max(digit_width(total), len(f"# of {col}"))

    lines = [
        bold(title),
        f"{'-' * len(title):<{label_w}} | {f'# of {col}':>{count_w}} | "
        f"{f'% of {col}':>{_PCT_W}} | {'Cumulative':>{_CUM_W}} | "
        f"{'Outstanding':>{_OUT_W}}",
        _row(
            f"{f'Total number of {total_noun}':>{label_w}}", total,
            100.0, 100.0, label_w, count_w,
        ),
        "",
    ]

    running = table.invalid
    lines.append(
        _row(
            f"Empty or invalid {direction} score", table.invalid,
            _pct(table.invalid, total), _pct(running, total),
            label_w, count_w,
        )
    )
    for score, count in table.items():
        running += count
        lines.append(
            _row(
                f"{prefix}{score:>{score_w}}", count,
                _pct(count, total), _pct(running, total),
                label_w, count_w,
            )
        )

    lines.append("")
    lines.append(
        f"Mean: {_fmt_stat(mean(table, table.valid))}    "
        f"Median: {_fmt_stat(median(table, table.valid))}"
    )
    return lines


def format_report(result: AccumulationResult) -> str:
    """Render both directions, separated by blank lines."""
    sections = [
        "\n".join(format_section(direction, table, result.total))
        for direction, table in result.tables()
    ]
    return "\n\n\n\n".join(sections) + "\n"


# ═══════════════════════════════════════════════════════════════════════════════
#  Input sources
# ═══════════════════════════════════════════════════════════════════════════════


def read_lines(source: str) -> Iterator[str]:
    """Yield lines from a file path, or from stdin for ``-``.

    Undecodable bytes are replaced so that they only spoil their own line.
    An unopenable path raises ``OSError`` on the first ``next()``, which the
    accumulator treats as end-of-stream.
    """
    if source == "-":
        if hasattr(sys.stdin, "reconfigure"):
            sys.stdin.reconfigure(errors="replace")
        yield from sys.stdin
        return
    with open(source, encoding="utf-8", errors="replace") as f:
        yield from f


# ═══════════════════════════════════════════════════════════════════════════════
#  Entry point
# ═══════════════════════════════════════════════════════════════════════════════


def run_report(
    sources: list[str],
    output: str | None = None,
    *,
    out: TextIO | None = None,
    max_score: int = MAX_SCORE,
) -> AccumulationResult:
    """Read every source in order, then print the report for all of them."""
    log = structlog.get_logger("report")
    acc = ScoreAccumulator(max_score)
    for source in sources:
        acc.ingest(read_lines(source))
    result = acc.result()

    (out or sys.stdout).write(format_report(result))

    if output:
        try:
            Path(output).write_text(json.dumps(result.to_dict(), indent=2))
        except OSError as exc:
            log.warning("raw_data_write_failed", path=output, error=str(exc))
        else:
            log.info("raw_data_written", path=output, total=result.total)
    return result
