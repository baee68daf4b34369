from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from datetime import date

from ..models.import_record import RECORD_FIELDS, ImportRecord
from .parser import QUOTE, check_delimiter

"""CSV rendering: sample template and record export.

Output is always readable back by parser.parse_csv with the same logical
cells: a cell is quoted when it contains the delimiter, a double quote or a
line break, and embedded quotes are doubled. Rows are joined with LF and the
text carries no trailing newline.
"""

__all__ = [
    "TEMPLATE_FILENAME",
    "TEMPLATE_HEADER",
    "TEMPLATE_ROWS",
    "escape_cell",
    "export_filename",
    "generate_template",
    "render_records",
    "render_rows",
    "safe_file_part",
]

TEMPLATE_FILENAME = "topic_prompts_template.csv"
TEMPLATE_HEADER: tuple[str, ...] = RECORD_FIELDS
TEMPLATE_ROWS: tuple[tuple[str, ...], ...] = (
    ("Product Features", "What are the main features of your product?", "US", "en-US"),
    ("Pricing", "How much does your product cost?", "US", "en-US"),
    ("Competitor Comparison", "How does your product compare to competitors?", "US", "en-US"),
)

_NON_SLUG = re.compile(r"[^a-z0-9]+")


def escape_cell(value: object, delimiter: str = ",") -> str:
    text = "" if value is None else str(value)
    if delimiter in text or QUOTE in text or "\n" in text or "\r" in text:
        return QUOTE + text.replace(QUOTE, QUOTE * 2) + QUOTE
    return text


def render_rows(rows: Iterable[Sequence[object]], delimiter: str = ",") -> str:
    check_delimiter(delimiter)
    return "\n".join(delimiter.join(escape_cell(c, delimiter) for c in row) for row in rows)


def generate_template(delimiter: str = ",") -> str:
    """Render the downloadable sample file (header + three example rows)."""
    return render_rows([TEMPLATE_HEADER, *TEMPLATE_ROWS], delimiter)


def render_records(records: Iterable[ImportRecord], delimiter: str = ",") -> str:
    """Export records under the template header, one row per record."""
    return render_rows([TEMPLATE_HEADER, *(r.as_row() for r in records)], delimiter)


def safe_file_part(value: str) -> str:
    """Slugify a label for use inside a file name.

    >>> safe_file_part("  Competitor Comparison! ")
    'competitor-comparison'
    """
    return _NON_SLUG.sub("-", value.strip().lower()).strip("-")


def export_filename(label: str, on: date | None = None) -> str:
    """Build ``topics-prompts-<label>-<YYYY-MM-DD>.csv``.

    An empty label (after slugifying) falls back to ``all-topics``.
    """
    day = on or date.today()
    part = safe_file_part(label) or "all-topics"
    return f"topics-prompts-{part}-{day.isoformat()}.csv"
