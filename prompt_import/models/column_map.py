from __future__ import annotations

from dataclasses import dataclass

"""ColumnMap model: semantic field -> zero-based column index.

A field that matched no header alias is None. topic and prompt are required;
country and locale fall back to per-row defaults.
"""

__all__ = [
    "REQUIRED_FIELDS",
    "ColumnMap",
]

REQUIRED_FIELDS = ("topic", "prompt")


@dataclass(frozen=True)
class ColumnMap:
    topic: int | None = None
    prompt: int | None = None
    country: int | None = None
    locale: int | None = None

    @property
    def missing_required(self) -> list[str]:
        """Required fields without a resolved column, in REQUIRED_FIELDS order."""
        return [name for name in REQUIRED_FIELDS if getattr(self, name) is None]

    @property
    def is_complete(self) -> bool:
        return not self.missing_required
