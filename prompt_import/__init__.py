"""Topic/prompt CSV importer.

Turns a user-supplied delimited text file of topic/prompt definitions into a
validated list of ImportRecord, or raises exactly one TopicImportError.
"""

from .csvfile.parser import parse_csv, tokenize, trim_trailing_blank_rows
from .csvfile.writer import generate_template, render_records
from .errors import (
    EmptyOrHeaderOnlyError,
    ErrorKind,
    MissingRequiredColumnsError,
    NoValidRowsError,
    TopicImportError,
)
from .models import ColumnMap, CoercionResult, ImportRecord, RecordDefaults
from .services import (
    coerce_rows,
    decode_bytes,
    import_topics,
    map_columns,
    normalize_header,
    resolve_header,
    run_import,
)

__version__ = "0.1.0"

__all__ = [
    "CoercionResult",
    "ColumnMap",
    "EmptyOrHeaderOnlyError",
    "ErrorKind",
    "ImportRecord",
    "MissingRequiredColumnsError",
    "NoValidRowsError",
    "RecordDefaults",
    "TopicImportError",
    "coerce_rows",
    "decode_bytes",
    "generate_template",
    "import_topics",
    "map_columns",
    "normalize_header",
    "parse_csv",
    "render_records",
    "resolve_header",
    "run_import",
    "tokenize",
    "trim_trailing_blank_rows",
]
