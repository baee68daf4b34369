from __future__ import annotations

from enum import Enum

"""Import error hierarchy for the topic/prompt CSV importer.

Every failure of the text -> records pipeline surfaces as exactly one
TopicImportError subclass carrying an ErrorKind. Individual malformed rows
never raise; they are dropped and only reported through diagnostics.
"""

__all__ = [
    "ErrorKind",
    "TopicImportError",
    "EmptyOrHeaderOnlyError",
    "MissingRequiredColumnsError",
    "NoValidRowsError",
]


class ErrorKind(Enum):
    """Failure classification reported to the caller."""
    EMPTY_OR_HEADER_ONLY = "EmptyOrHeaderOnly"
    MISSING_REQUIRED_COLUMNS = "MissingRequiredColumns"
    NO_VALID_ROWS = "NoValidRows"


class TopicImportError(Exception):
    """Base exception for pipeline failures."""
    kind: ErrorKind

    @property
    def error_type(self) -> str:
        # エラーログ用 UPPER_SNAKE
        return self.kind.name


class EmptyOrHeaderOnlyError(TopicImportError):
    """Raised when fewer than 2 rows remain after trimming trailing blanks."""
    kind = ErrorKind.EMPTY_OR_HEADER_ONLY

    def __init__(self, message: str = "CSV file is empty or missing data rows") -> None:
        super().__init__(message)


class MissingRequiredColumnsError(TopicImportError):
    """Raised when the header has no resolvable topic or prompt column."""
    kind = ErrorKind.MISSING_REQUIRED_COLUMNS

    def __init__(self, missing: list[str] | None = None) -> None:
        self.missing = list(missing or [])
        super().__init__('CSV must contain "topic" and "prompt" columns')


class NoValidRowsError(TopicImportError):
    """Raised when every data row was dropped for a missing topic or prompt."""
    kind = ErrorKind.NO_VALID_ROWS

    def __init__(self, message: str = "No valid topics or prompts found in CSV") -> None:
        super().__init__(message)
