"""Tests for the tolerant score line parser."""

from __future__ import annotations

import pytest
from hypothesis import given, strategies as st

from src.scoring.parser import LineFormat, ParsedLine, parse_line


@pytest.mark.parametrize(
    "line, expected",
    [
        ("5 0\n", ParsedLine(5, 0, LineFormat.PAIR)),
        ("  12\t34\r\n", ParsedLine(12, 34, LineFormat.PAIR)),
        ("+5 +6", ParsedLine(5, 6, LineFormat.PAIR)),
        ("5 0 trailing text", ParsedLine(5, 0, LineFormat.PAIR)),
        # no whitespace needed before a signed second value
        ("5-3", ParsedLine(5, None, LineFormat.PAIR)),
        ("7 -1", ParsedLine(7, None, LineFormat.PAIR)),
        ("-1 7", ParsedLine(None, 7, LineFormat.PAIR)),
        ("99999999999 1", ParsedLine(99999999999, 1, LineFormat.PAIR)),
    ],
)
def test_pair(line, expected):
    assert parse_line(line) == expected


@pytest.mark.parametrize(
    "line, expected",
    [
        ("100 -\n", ParsedLine(100, None, LineFormat.INBOUND_ONLY)),
        ("1234", ParsedLine(1234, None, LineFormat.INBOUND_ONLY)),
        ("8 n/a", ParsedLine(8, None, LineFormat.INBOUND_ONLY)),
        # a negative leading value with junk after it: both sides missing
        ("-5x", ParsedLine(None, None, LineFormat.INBOUND_ONLY)),
    ],
)
def test_inbound_only(line, expected):
    assert parse_line(line) == expected


@pytest.mark.parametrize(
    "line, expected",
    [
        ("- 50\n", ParsedLine(None, 50, LineFormat.OUTBOUND_ONLY)),
        ("-\t3", ParsedLine(None, 3, LineFormat.OUTBOUND_ONLY)),
        ("n/a 7", ParsedLine(None, 7, LineFormat.OUTBOUND_ONLY)),
        ("--5", ParsedLine(None, None, LineFormat.OUTBOUND_ONLY)),
    ],
)
def test_outbound_only(line, expected):
    assert parse_line(line) == expected


@pytest.mark.parametrize(
    "line",
    ["", "\n", "-", "- -", "hello world\n", "hello world 5", "abc5", " - 50"],
)
def test_unmatched_lines_are_discarded(line):
    assert parse_line(line) is None


@given(st.integers(min_value=0, max_value=10**6), st.integers(min_value=0, max_value=10**6))
def test_any_non_negative_pair(a, b):
    assert parse_line(f"{a} {b}\n") == ParsedLine(a, b, LineFormat.PAIR)


@given(st.text(alphabet=st.characters(blacklist_categories=("Nd",))))
def test_text_without_digits_never_matches(line):
    assert parse_line(line) is None
