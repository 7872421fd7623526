from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import MAXYEAR, MINYEAR, date
from pathlib import Path
from typing import Callable

YEAR_MONTH_RE = re.compile(r"^(?P<year>[0-9]{4})-(?P<month>[0-9]{2})$")


class TemporalInvariantError(AssertionError):
    """A date was found that lies after the month it is being compared against."""


@dataclass(frozen=True)
class YearMonth:
    """A calendar month (no day precision). Displays as YYYY-MM."""

    year: int
    month: int

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise ValueError(f"Month must be in 1..12: {self.month}")
        if not MINYEAR <= self.year <= MAXYEAR:
            raise ValueError(f"Year must be in {MINYEAR}..{MAXYEAR}: {self.year}")

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"

    @classmethod
    def parse(cls, s: str) -> "YearMonth":
        m = YEAR_MONTH_RE.match(s.strip())
        if not m:
            raise ValueError(f"Expected YYYY-MM, got: {s!r}")
        return cls(year=int(m.group("year")), month=int(m.group("month")))

    @classmethod
    def today(cls, clock: Callable[[], date] = date.today) -> "YearMonth":
        d = clock()
        return cls(year=d.year, month=d.month)

    def first_day(self) -> date:
        return date(self.year, self.month, 1)

    def months_since(self, other: "YearMonth") -> int:
        """Approximate whole months from other to self (days between the 1st of each, // 30).

        Raises TemporalInvariantError if other is after self.
        """
        days = (self.first_day() - other.first_day()).days
        if days < 0:
            raise TemporalInvariantError(f"found date {other} that is after {self}")
        return days // 30


@dataclass(frozen=True)
class Annotation:
    """An "as of <Month> <Year>" occurrence: the line it ends on and the month it names."""

    line: int
    when: YearMonth


# Documents keyed by path, iterated in path order.
DocumentAnnotations = dict[Path, list[Annotation]]


@dataclass(frozen=True)
class CheckPolicy:
    """Controls which documents are scanned and what counts as stale.

    - min_months_since: annotations at least this many months old are reported (inclusive).
    - pattern: glob, relative to the scanned root, selecting the documents.
    """

    min_months_since: int = 6
    pattern: str = "**/*.md"
