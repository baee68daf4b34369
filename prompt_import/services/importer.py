from __future__ import annotations

import logging
from pathlib import Path

from ..csvfile.parser import parse_csv
from ..errors import EmptyOrHeaderOnlyError, NoValidRowsError
from ..models.coercion_result import CoercionResult
from ..models.import_record import ImportRecord, RecordDefaults
from .header_resolver import resolve_header
from .row_coercer import coerce_rows_with_diagnostics

"""Text -> records pipeline for topic/prompt files.

raw text -> parse_csv (tokenize + trailing blank trim) -> resolve_header(row 0)
-> coerce rows 1..N -> records, or exactly one TopicImportError.

Every function here is a pure function of its input; nothing is shared between
calls.
"""

__all__ = [
    "DEFAULT_ENCODING",
    "decode_bytes",
    "import_file",
    "import_topics",
    "run_import",
]

logger = logging.getLogger(__name__)

# BOM 付き UTF-8 もそのまま読めるように utf-8-sig
DEFAULT_ENCODING = "utf-8-sig"


def decode_bytes(data: bytes, encoding: str = DEFAULT_ENCODING) -> str:
    """Decode raw file bytes in a single fixed encoding.

    Undecodable bytes become U+FFFD rather than failing the import.
    """
    return data.decode(encoding, errors="replace")


def run_import(
    text: str, *, delimiter: str = ",", defaults: RecordDefaults | None = None
) -> CoercionResult:
    """Run the full pipeline, keeping dropped-row diagnostics.

    Raises:
        EmptyOrHeaderOnlyError: Fewer than 2 rows after trimming
        MissingRequiredColumnsError: No topic or prompt column in the header
        NoValidRowsError: Every data row lacked a topic or prompt
    """
    table = parse_csv(text, delimiter)
    if len(table) < 2:
        raise EmptyOrHeaderOnlyError()

    column_map = resolve_header(table[0])
    result = coerce_rows_with_diagnostics(table[1:], column_map, defaults)
    if not result.records:
        raise NoValidRowsError()

    logger.debug(
        "import rows=%d records=%d dropped=%d",
        len(table) - 1,
        result.record_count,
        result.dropped_count,
    )
    return result


def import_topics(
    text: str, *, delimiter: str = ",", defaults: RecordDefaults | None = None
) -> list[ImportRecord]:
    """Convert file text into records; all-or-nothing."""
    return run_import(text, delimiter=delimiter, defaults=defaults).records


def import_file(
    path: Path,
    *,
    delimiter: str = ",",
    encoding: str = DEFAULT_ENCODING,
    defaults: RecordDefaults | None = None,
) -> CoercionResult:
    """Read, decode and import a file from disk.

    OSError from reading propagates unchanged; it is not a pipeline error.
    """
    text = decode_bytes(path.read_bytes(), encoding)
    return run_import(text, delimiter=delimiter, defaults=defaults)
