"""Tolerant parser for ``INBOUND OUTBOUND`` anomaly score lines.

Accepted shapes, tried in order (first match wins)::

    5 0        both scores
    5 -        inbound only; anything that is not a second integer follows
    - 0        outbound only; a leading "-" or other non-numeric token
    n/a 0      (same rule as above)

Anything else is discarded.  Negative values are treated as missing, so
``-1`` and ``-`` mean the same thing.
"""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass

# A run of digits is never split between two integers
_INT = r"([+-]?\d+)(?!\d)"

# Leading whitespace is skipped before an integer, never before the marker
_PAIR_RE = re.compile(rf"\s*{_INT}\s*{_INT}", re.ASCII)
_INBOUND_RE = re.compile(rf"\s*{_INT}", re.ASCII)
_OUTBOUND_RE = re.compile(rf"(?:-|[^\s\d]+\s)\s*{_INT}", re.ASCII)


class LineFormat(enum.Enum):
    """Which rule matched a line."""

    PAIR = "pair"
    INBOUND_ONLY = "inbound_only"
    OUTBOUND_ONLY = "outbound_only"


@dataclass(frozen=True)
class ParsedLine:
    """One parsed line.  ``None`` marks a missing or negative score."""

    inbound: int | None
    outbound: int | None
    fmt: LineFormat


def _score(raw: str) -> int | None:
    value = int(raw)
    return value if value >= 0 else None


def parse_line(line: str) -> ParsedLine | None:
    """Parse *line*, returning ``None`` when no rule matches."""
    m = _PAIR_RE.match(line)
    if m:
        return ParsedLine(_score(m[1]), _score(m[2]), LineFormat.PAIR)

    m = _INBOUND_RE.match(line)
    if m:
        return ParsedLine(_score(m[1]), None, LineFormat.INBOUND_ONLY)

    m = _OUTBOUND_RE.match(line)
    if m:
        return ParsedLine(None, _score(m[1]), LineFormat.OUTBOUND_ONLY)

    return None
