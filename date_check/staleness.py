from __future__ import annotations

from pathlib import Path
from typing import Iterable

from .types import Annotation, DocumentAnnotations, TemporalInvariantError, YearMonth


def filter_stale(
    current_month: YearMonth,
    min_months_since: int,
    docs: Iterable[tuple[Path, list[Annotation]]],
) -> DocumentAnnotations:
    """Keep only annotations at least min_months_since old; drop documents left with none.

    Output is keyed by path in path order regardless of input order.
    """

    kept: DocumentAnnotations = {}
    for path, annotations in sorted(docs, key=lambda kv: kv[0].parts):
        stale: list[Annotation] = []
        for a in annotations:
            try:
                age = current_month.months_since(a.when)
            except TemporalInvariantError as e:
                raise TemporalInvariantError(f"{path} line {a.line}: {e}") from e
            if age >= min_months_since:
                stale.append(a)
        if stale:
            kept[path] = stale
    return kept
