from __future__ import annotations

from dataclasses import asdict, dataclass

"""ImportRecord model for the topic/prompt CSV importer.

ImportRecord is the validated output unit of the pipeline: one tracked prompt
under a topic, with its market (country) and language (locale).
"""

__all__ = [
    "DEFAULT_COUNTRY",
    "DEFAULT_LOCALE",
    "RECORD_FIELDS",
    "ImportRecord",
    "RecordDefaults",
]

DEFAULT_COUNTRY = "US"
DEFAULT_LOCALE = "en-US"

# 出力列順 (テンプレートヘッダと同一)
RECORD_FIELDS = ("topic", "prompt", "country", "locale")


@dataclass(frozen=True)
class RecordDefaults:
    """Values substituted when a row's country/locale is absent or blank."""
    country: str = DEFAULT_COUNTRY
    locale: str = DEFAULT_LOCALE


@dataclass(frozen=True)
class ImportRecord:
    """A single validated topic/prompt definition.

    topic and prompt are always non-empty and trimmed; country and locale are
    trimmed and default-filled.
    """
    topic: str
    prompt: str
    country: str = DEFAULT_COUNTRY
    locale: str = DEFAULT_LOCALE

    def to_dict(self) -> dict[str, str]:
        return asdict(self)

    def as_row(self) -> list[str]:
        """Cells in RECORD_FIELDS order, ready for CSV rendering."""
        return [self.topic, self.prompt, self.country, self.locale]
