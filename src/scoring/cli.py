"""CLI entrypoint for the anomaly score report."""

from __future__ import annotations

import argparse

from src.common.logging import configure_structlog
from src.scoring.report import run_report


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description=(
            "Summarise ModSecurity inbound/outbound anomaly scores, "
            "one 'INBOUND OUTBOUND' pair per line."
        ),
        epilog='example: grep -E -o "[0-9-]+ [0-9-]+$" waf.log | %(prog)s',
    )
    parser.add_argument(
        "files",
        nargs="*",
        default=["-"],
        metavar="FILE",
        help="Score files to read (default: stdin; '-' also means stdin)",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Path to write raw JSON data dump",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Log debug events (discarded lines, ingest totals) to stderr",
    )
    args = parser.parse_args(argv)

    configure_structlog(verbose=args.verbose)
    run_report(args.files, args.output)
    return 0
