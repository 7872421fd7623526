"""Find "as of <Month> <Year>" annotations in docs that have gone stale.

Pipeline: discover documents -> extract annotations -> keep the stale ones -> render a checklist.
"""

from .check import check_dates
from .parsers import extract_annotations
from .report import EMPTY, render_report
from .sources import InputAccessError, discover_documents, read_document
from .staleness import filter_stale
from .types import Annotation, CheckPolicy, DocumentAnnotations, TemporalInvariantError, YearMonth
