"""
Configuration for the dashboard.

Settings come from the command line, with the store path also taken from the
``SAGRADING_DB`` environment variable when no ``--db`` flag is given.
"""

from __future__ import annotations

import argparse
import logging
import os
from dataclasses import dataclass

from sagrading.data_formats import DEFAULT_FOOTNOTE

DB_ENV_VAR = "SAGRADING_DB"
DEFAULT_DB_PATH = os.path.join(".", "data", "db.json")
DEFAULT_TICK_RATE_MS = 200

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass
class Settings:
    """Resolved settings for one dashboard session."""

    db_path: str = DEFAULT_DB_PATH
    tick_rate_ms: int = DEFAULT_TICK_RATE_MS
    footnote: str = DEFAULT_FOOTNOTE
    init: bool = False
    log_file: str | None = None
    log_level: str = "INFO"

    @property
    def tick_rate(self) -> float:
        """Tick interval in seconds."""
        return self.tick_rate_ms / 1000

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level)


def _positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer (got {value})")
    return number


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        prog="sagrading",
        description="Browse, add and delete graded groups stored in a JSON file.",
    )
    parser.add_argument(
        "--db",
        dest="db_path",
        default=None,
        help=f"Path to the JSON store (default: ${DB_ENV_VAR} or {DEFAULT_DB_PATH})",
    )
    parser.add_argument(
        "--tick-rate",
        dest="tick_rate_ms",
        type=_positive_int,
        default=DEFAULT_TICK_RATE_MS,
        help=f"Redraw interval in milliseconds (default: {DEFAULT_TICK_RATE_MS})",
    )
    parser.add_argument(
        "--grader",
        dest="footnote",
        default=DEFAULT_FOOTNOTE,
        help="Footnote stored on groups created with 'a'",
    )
    parser.add_argument(
        "--init",
        action="store_true",
        help="Create an empty store if the file does not exist",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Also write log records to this file",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="INFO",
        help="Log level (default: INFO)",
    )
    return parser


def parse_settings(argv: list[str] | None = None) -> Settings:
    """Parse command line arguments into Settings."""
    args = build_parser().parse_args(argv)
    db_path = args.db_path or os.environ.get(DB_ENV_VAR) or DEFAULT_DB_PATH
    return Settings(
        db_path=db_path,
        tick_rate_ms=args.tick_rate_ms,
        footnote=args.footnote,
        init=args.init,
        log_file=args.log_file,
        log_level=args.log_level,
    )
