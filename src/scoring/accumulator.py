"""Single-pass accumulation of inbound / outbound score frequencies."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

import structlog

from src.common.constants import INBOUND, MAX_SCORE, OUTBOUND
from src.scoring.parser import parse_line
from src.scoring.stats import mean, median
from src.scoring.table import FrequencyTable


@dataclass(frozen=True)
class AccumulationResult:
    """Final tallies, read-only once ingestion has finished."""

    inbound: FrequencyTable
    outbound: FrequencyTable
    total: int  # lines that matched a format, counted once per line

    @property
    def invalid_in(self) -> int:
        return self.inbound.invalid

    @property
    def invalid_out(self) -> int:
        return self.outbound.invalid

    def tables(self) -> list[tuple[str, FrequencyTable]]:
        return [(INBOUND, self.inbound), (OUTBOUND, self.outbound)]

    def to_dict(self) -> dict:
        """JSON-friendly summary (used for the ``--output`` dump)."""
        data: dict = {"total": self.total}
        for direction, table in self.tables():
            data[direction] = {
                "invalid": table.invalid,
                "counts": {str(s): c for s, c in table.items()},
                "mean": mean(table, table.valid),
                "median": median(table, table.valid),
            }
        return data


class ScoreAccumulator:
    """Consume score lines and tally them into two frequency tables.

    Usage::

        acc = ScoreAccumulator()
        acc.ingest(sys.stdin)
        result = acc.result()

    :meth:`ingest` may be called several times (one call per input source)
    until :meth:`result` hands the tables off.
    """

    def __init__(self, max_score: int = MAX_SCORE) -> None:
        self._inbound = FrequencyTable(max_score)
        self._outbound = FrequencyTable(max_score)
        self._total = 0
        self._discarded = 0
        self._finished = False
        self._log = structlog.get_logger("accumulator")

    @property
    def total(self) -> int:
        return self._total

    @property
    def discarded(self) -> int:
        return self._discarded

    def add_line(self, line: str) -> bool:
        """Tally one line.  Returns False if it matched no format."""
        if self._finished:
            raise RuntimeError("accumulator already handed off its result")
        parsed = parse_line(line)
        if parsed is None:
            self._discarded += 1
            self._log.debug("line_discarded", line=line.rstrip("\r\n"))
            return False

        self._inbound.increment(parsed.inbound)
        self._outbound.increment(parsed.outbound)
        self._total += 1
        return True

    def ingest(self, lines: Iterable[str]) -> int:
        """Consume *lines* until exhausted or unreadable.

        A read error ends ingestion exactly like end-of-stream; everything
        tallied before it is kept.  Returns the number of lines accepted.
        """
        before = self._total
        it = iter(lines)
        while True:
            try:
                line = next(it)
            except StopIteration:
                break
            except (OSError, UnicodeDecodeError) as exc:
                self._log.warning(
                    "input_read_failed",
                    error=str(exc),
                    lines_accepted=self._total - before,
                )
                break
            self.add_line(line)

        self._log.debug(
            "ingest_done",
            lines_accepted=self._total - before,
            total=self._total,
            discarded=self._discarded,
        )
        return self._total - before

    def result(self) -> AccumulationResult:
        """Finish ingestion and return the tallies."""
        self._finished = True
        self._inbound.freeze()
        self._outbound.freeze()
        return AccumulationResult(self._inbound, self._outbound, self._total)
