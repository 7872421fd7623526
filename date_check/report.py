from __future__ import annotations

from pathlib import Path

from .local_paths import relative_posix
from .types import DocumentAnnotations, YearMonth

EMPTY = "empty"


def render_report(current_month: YearMonth, stale: DocumentAnnotations, root: Path) -> str:
    """Render the triage checklist, or EMPTY when there is nothing to report.

    Paths are shown relative to root, with forward slashes, in the mapping's order.
    """

    if not stale:
        return EMPTY

    lines = [
        f"Date Reference Triage for {current_month}",
        "## Procedure",
        "",
        "Each of these dates should be checked to see if the docs they annotate are "
        "up-to-date. Each date should be updated (in the Markdown file where it appears) to "
        f"use the current month ({current_month}), or removed if the docs it annotates are not "
        "expected to fall out of date quickly.",
        "",
        "Please check off each date once a PR to update it (and, if applicable, its "
        "surrounding docs) has been merged. Please also mention that you are working on a "
        "particular set of dates so duplicate work is avoided.",
        "",
        "Finally, once all the dates have been updated, please close this issue.",
        "",
        "## Dates",
        "",
    ]
    for path, annotations in stale.items():
        lines.append(f"- [ ] {relative_posix(path, root)}")
        for a in annotations:
            lines.append(f"  - [ ] line {a.line}: {a.when}")
    # trailing blank line after the checklist
    lines.append("")
    return "\n".join(lines)
