from __future__ import annotations

import re

from .types import Annotation, YearMonth

# "as of <word> <yyyy>"; the word is checked against MONTHS afterwards.
AS_OF_RE = re.compile(r"as\s+of\s+(?P<month>\w+)\s+(?P<year>[0-9]{4})", re.IGNORECASE)

MONTHS = {
    "january": 1,
    "february": 2,
    "march": 3,
    "april": 4,
    "may": 5,
    "june": 6,
    "july": 7,
    "august": 8,
    "september": 9,
    "october": 10,
    "november": 11,
    "december": 12,
}


def month_token_to_int(tok: str) -> int | None:
    """Full month name or its three-letter abbreviation, any case. None if unrecognised."""
    tok = tok.strip().lower()
    if len(tok) == 3:
        for name, num in MONTHS.items():
            if name.startswith(tok):
                return num
        return None
    return MONTHS.get(tok)


def extract_annotations(text: str) -> list[Annotation]:
    """Find every "as of <Month> <Year>" in text, in order of appearance.

    Each annotation is attributed to the line holding the last character of the match.
    Candidates whose month word (or year) is not a valid calendar value are skipped.
    """

    out: list[Annotation] = []
    line = 1
    last_end = 0
    for m in AS_OF_RE.finditer(text):
        line += text.count("\n", last_end, m.end())
        last_end = m.end()

        mo = month_token_to_int(m.group("month"))
        if mo is None:
            continue
        try:
            when = YearMonth(year=int(m.group("year")), month=mo)
        except ValueError:
            continue
        out.append(Annotation(line=line, when=when))
    return out
