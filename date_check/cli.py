"""Report "as of <Month> <Year>" annotations in Markdown docs that have gone stale.

Prints a Markdown checklist (suitable as an issue body) listing every stale
date by file and line, or the single word `empty` when nothing is stale.

Example:
  date-check src/
  date-check docs/ --current-month 2021-07 --min-months 6
"""

from __future__ import annotations

import argparse
from pathlib import Path, PurePosixPath

from .check import check_dates
from .sources import InputAccessError
from .types import CheckPolicy, YearMonth


def _year_month(s: str) -> YearMonth:
    try:
        return YearMonth.parse(s)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def _non_negative(s: str) -> int:
    n = int(s)
    if n < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0: {n}")
    return n


def _pattern(s: str) -> str:
    p = PurePosixPath(s)
    if p.is_absolute() or ".." in p.parts:
        raise argparse.ArgumentTypeError(f"must stay under root (no absolute path or '..'): {s}")
    return s


def main(argv: list[str] | None = None) -> int:
    defaults = CheckPolicy()
    ap = argparse.ArgumentParser(
        prog="date-check",
        description=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    ap.add_argument("root", help="Root Markdown directory to scan")
    ap.add_argument(
        "--min-months",
        type=_non_negative,
        default=defaults.min_months_since,
        help=f"Report dates at least this many months old (default: {defaults.min_months_since})",
    )
    ap.add_argument(
        "--pattern",
        type=_pattern,
        default=defaults.pattern,
        help=f"Glob, relative to root, selecting documents (default: {defaults.pattern})",
    )
    ap.add_argument(
        "--current-month",
        type=_year_month,
        default=None,
        help="Compare against this YYYY-MM instead of today's month",
    )
    ap.add_argument("--verbose", action="store_true", help="Print progress to stderr")
    args = ap.parse_args(argv)

    current_month = args.current_month or YearMonth.today()
    policy = CheckPolicy(min_months_since=args.min_months, pattern=args.pattern)

    try:
        report = check_dates(
            Path(args.root),
            current_month=current_month,
            policy=policy,
            verbose=args.verbose,
        )
    except InputAccessError as e:
        raise SystemExit(str(e))

    print(report)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
