"""
Command line tool that rewrites WKT in its most compact form.

Each input is parsed with ``loads`` and written back with ``wkt_optimal``,
one geometry per output line. Inputs that do not parse are logged on
stderr and make the command exit with status 1.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, List, Optional, TextIO

from geowkt import __version__
from geowkt.core.errors import GeoWktException
from geowkt.core.formatters import wkt_optimal
from geowkt.core.logging_config import setup_logging
from geowkt.core.parsers import loads

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="geowkt",
        description="Rewrite WKT geometries in their most compact form.",
    )
    parser.add_argument(
        "wkt",
        nargs="*",
        help="WKT strings to convert. Standard input is read, one geometry "
        "per line, when none are given.",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Log level, defaults to GEOWKT_LOG_LEVEL.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write logs to this rotating file.",
    )
    parser.add_argument(
        "--json-logs",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Write logs as JSON lines, the default in production.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def convert_lines(lines: Iterable[str], out: TextIO) -> int:
    """
    Convert WKT lines and write one optimal WKT string per line to ``out``.

    Blank lines are skipped.

    Returns:
        Number of lines that could not be converted
    """
    failures = 0
    for number, line in enumerate(lines, start=1):
        text = line.strip()
        if not text:
            continue
        try:
            out.write(wkt_optimal(loads(text)) + "\n")
        except GeoWktException as e:
            failures += 1
            logger.error(
                f"Line {number}: {e}",
                extra={"input_line": number, "error_code": e.error_code},
            )
    return failures


def main(argv: Optional[List[str]] = None) -> int:
    """Run the converter and return the process exit status."""
    args = build_parser().parse_args(argv)
    setup_logging(
        log_level=args.log_level,
        log_file=args.log_file,
        json_logs=args.json_logs,
    )

    lines = args.wkt or sys.stdin
    failures = convert_lines(lines, sys.stdout)
    if failures:
        logger.warning(f"{failures} geometries could not be converted")
        return 1
    return 0
