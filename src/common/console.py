"""ANSI colour codes and report layout helpers."""

from __future__ import annotations

import sys


class C:
    """ANSI colour codes (no-op if not a tty)."""

    _tty = sys.stdout.isatty()
    BOLD = "\033[1m" if _tty else ""
    NC = "\033[0m" if _tty else ""


def bold(text: str) -> str:
    return f"{C.BOLD}{text}{C.NC}"


def digit_width(n: int) -> int:
    """Number of characters needed to print ``abs(n)``."""
    return len(str(abs(n)))
