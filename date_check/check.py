from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable

from .report import render_report
from .sources import discover_documents, iter_annotations, read_document
from .staleness import filter_stale
from .types import CheckPolicy, YearMonth


def check_dates(
    root: Path,
    *,
    current_month: YearMonth,
    policy: CheckPolicy = CheckPolicy(),
    discover: Callable[[Path, str], list[Path]] = discover_documents,
    read: Callable[[Path], str] = read_document,
    verbose: bool = False,
) -> str:
    """Scan root for stale "as of" dates and return the rendered triage report.

    discover/read stand in for the filesystem so tests can feed literal documents.
    Everything is read before anything is rendered, so a read failure yields no report.
    """

    paths = discover(root, policy.pattern)
    if verbose:
        print(f"Scanning {len(paths)} document(s) under {root} ({policy.pattern})", file=sys.stderr)

    found = []
    for path, annotations in iter_annotations(paths, read=read):
        if verbose:
            print(f"  {path}: {len(annotations)} date(s)", file=sys.stderr)
        found.append((path, annotations))

    stale = filter_stale(current_month, policy.min_months_since, found)
    if verbose:
        n = sum(len(v) for v in stale.values())
        print(
            f"{n} date(s) in {len(stale)} document(s) are at least "
            f"{policy.min_months_since} month(s) older than {current_month}",
            file=sys.stderr,
        )
    return render_report(current_month, stale, root)
