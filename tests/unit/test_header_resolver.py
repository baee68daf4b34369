from __future__ import annotations

import pytest

from prompt_import.errors import ErrorKind, MissingRequiredColumnsError
from prompt_import.models.column_map import ColumnMap
from prompt_import.services.header_resolver import (
    COLUMN_ALIASES,
    map_columns,
    normalize_header,
    resolve_header,
)


@pytest.mark.parametrize(
    ("cell", "expected"),
    [
        ("topic", "topic"),
        (" Topic ", "topic"),
        ("TOPIC", "topic"),
        ("Query Text", "query_text"),
        ("  country \t code ", "country_code"),
        ("", ""),
    ],
)
def test_normalize_header(cell, expected):
    assert normalize_header(cell) == expected


def test_alias_table_priority_order():
    assert COLUMN_ALIASES["prompt"] == ("prompt", "query", "query_text")
    assert COLUMN_ALIASES["country"] == ("country", "country_code")


def test_query_topic_header():
    cm = resolve_header(["Query", "Topic"])
    assert cm.prompt == 0
    assert cm.topic == 1
    assert cm.country is None
    assert cm.locale is None


@pytest.mark.parametrize("topic_cell", [" Topic ", "TOPIC", "topic"])
def test_topic_spellings_resolve_identically(topic_cell):
    assert resolve_header([topic_cell, "prompt"]) == ColumnMap(topic=0, prompt=1)


def test_alias_priority_beats_column_order():
    # query が先に並んでいても prompt が優先
    cm = resolve_header(["query", "topic", "prompt"])
    assert cm.prompt == 2


def test_query_text_and_country_code_aliases():
    cm = resolve_header(["Query Text", "Topic", "Country Code", "Locale"])
    assert cm == ColumnMap(topic=1, prompt=0, country=2, locale=3)


def test_duplicate_keys_first_occurrence_wins():
    cm = resolve_header(["topic", "Topic", "prompt", "PROMPT"])
    assert cm.topic == 0
    assert cm.prompt == 2


def test_missing_required_columns():
    with pytest.raises(MissingRequiredColumnsError) as e:
        resolve_header(["foo", "bar"])
    assert e.value.kind is ErrorKind.MISSING_REQUIRED_COLUMNS
    assert e.value.missing == ["topic", "prompt"]
    assert str(e.value) == 'CSV must contain "topic" and "prompt" columns'


def test_missing_prompt_only():
    with pytest.raises(MissingRequiredColumnsError) as e:
        resolve_header(["topic", "country"])
    assert e.value.missing == ["prompt"]


def test_map_columns_never_fails():
    cm = map_columns([])
    assert cm == ColumnMap()
    assert not cm.is_complete
