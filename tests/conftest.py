"""
Pytest fixtures for the score report tests. structlog events are captured
in memory instead of being printed.
"""

from __future__ import annotations

import pytest
import structlog
from structlog.testing import LogCapture

from src.scoring.accumulator import ScoreAccumulator
from src.scoring.table import FrequencyTable


@pytest.fixture
def log_output():
    return LogCapture()


@pytest.fixture(autouse=True)
def _capture_structlog(log_output):
    structlog.reset_defaults()
    structlog.configure(processors=[log_output])
    yield
    structlog.reset_defaults()


@pytest.fixture
def small_table():
    """Table over 0..10 so clamping is easy to hit."""
    return FrequencyTable(max_score=10)


@pytest.fixture
def accumulator():
    return ScoreAccumulator()


@pytest.fixture
def table_of():
    """Factory building a table from a score -> occurrences mapping."""

    def build(counts: dict[int, int], max_score: int = 100) -> FrequencyTable:
        table = FrequencyTable(max_score)
        for score, n in counts.items():
            for _ in range(n):
                table.increment(score)
        return table

    return build
