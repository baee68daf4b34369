from __future__ import annotations

import json
from pathlib import Path

import jsonschema
import pytest

from prompt_import.errors import EmptyOrHeaderOnlyError, MissingRequiredColumnsError, NoValidRowsError
from prompt_import.models.error_record import ErrorRecord

"""Error log JSON Lines schema contract."""

SCHEMA_PATH = Path(__file__).parent / "error_log_schema.json"


@pytest.fixture(scope="module")
def schema() -> dict:
    return json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))


@pytest.mark.parametrize(
    "error", [EmptyOrHeaderOnlyError(), MissingRequiredColumnsError(["topic"]), NoValidRowsError()]
)
def test_file_level_records_match_schema(schema, error):
    record = ErrorRecord.create("topics.csv", -1, error.error_type, str(error))
    jsonschema.validate(json.loads(record.to_json_line()), schema)


def test_row_level_record_matches_schema(schema):
    record = ErrorRecord.create("topics.csv", 7, "MISSING_TOPIC_OR_PROMPT", "row skipped")
    jsonschema.validate(json.loads(record.to_json_line()), schema)


def test_schema_rejects_extra_key(schema):
    data = json.loads(ErrorRecord.create("t.csv", -1, "NO_VALID_ROWS", "x").to_json_line())
    data["extra"] = "not allowed"
    with pytest.raises(jsonschema.exceptions.ValidationError):
        jsonschema.validate(data, schema)
