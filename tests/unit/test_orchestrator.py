from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from prompt_import.config.loader import ImportConfig
from prompt_import.csvfile.parser import parse_csv
from prompt_import.logging.error_log import ErrorLogBuffer
from prompt_import.models.import_record import RecordDefaults
from prompt_import.services.orchestrator import (
    ProcessingError,
    output_path_for,
    process_all,
    scan_csv_files,
)


@pytest.fixture()
def config(temp_workdir: Path) -> ImportConfig:
    return ImportConfig(source_directory="./data", output_directory="./out")


def test_scan_csv_files_filters_and_sorts(temp_workdir: Path, write_csv):
    write_csv("b.csv", "x")
    write_csv("A.CSV", "x")
    write_csv("notes.txt", "x")
    write_csv("old.normalized.csv", "x")
    (temp_workdir / "data" / "sub.csv").mkdir()
    names = [p.name for p in scan_csv_files(temp_workdir / "data")]
    assert names == ["A.CSV", "b.csv"]


def test_scan_csv_files_missing_directory(temp_workdir: Path):
    with pytest.raises(ProcessingError, match="Directory not found"):
        scan_csv_files(temp_workdir / "missing")


def test_scan_csv_files_not_a_directory(temp_workdir: Path, write_csv):
    f = write_csv("a.csv", "x")
    with pytest.raises(ProcessingError, match="not a directory"):
        scan_csv_files(f)


def test_output_path_for():
    assert output_path_for(Path("data/topics.csv"), Path("out")) == Path("out/topics.normalized.csv")


def test_process_all_empty_directory(config: ImportConfig):
    result = process_all(config)
    assert result.total_files == 0
    assert result.total_records == 0
    assert result.throughput_records_per_sec >= 0
    assert result.file_stats == []


def test_process_all_success_writes_normalized_output(
    config: ImportConfig, temp_workdir: Path, write_csv, valid_csv_text: str
):
    write_csv("topics.csv", valid_csv_text)
    result = process_all(config)
    assert result.success_files == 1
    assert result.failed_files == 0
    assert result.total_records == 2
    assert result.total_dropped_rows == 1

    out = temp_workdir / "out" / "topics.normalized.csv"
    assert result.file_stats[0].output_path == str(Path("out") / "topics.normalized.csv")
    assert parse_csv(out.read_text(encoding="utf-8")) == [
        ["topic", "prompt", "country", "locale"],
        ["Pricing", "How much does it cost?", "US", "en-US"],
        ["Features", "What can it do?", "US", "en-US"],
    ]


def test_process_all_uses_config_defaults_and_delimiter(temp_workdir: Path, write_csv):
    cfg = ImportConfig(
        source_directory="./data",
        output_directory="./out",
        delimiter=";",
        defaults=RecordDefaults(country="DE", locale="de-DE"),
    )
    write_csv("de.csv", "Topic;Query\nPreise;Was kostet es, bitte?\n")
    result = process_all(cfg)
    assert result.success_files == 1
    text = (temp_workdir / "out" / "de.normalized.csv").read_text(encoding="utf-8")
    assert text == "topic;prompt;country;locale\nPreise;Was kostet es, bitte?;DE;de-DE"


def test_process_all_failed_file_is_logged(config: ImportConfig, temp_workdir: Path, write_csv):
    write_csv("good.csv", "topic,prompt\nA,B\n")
    write_csv("bad.csv", "foo,bar\n1,2\n")
    error_log = ErrorLogBuffer()
    result = process_all(config, error_log=error_log)

    assert result.success_files == 1
    assert result.failed_files == 1
    stats = {s.file_name: s for s in result.file_stats}
    assert stats["bad.csv"].status == "failed"
    assert stats["bad.csv"].error == "MISSING_REQUIRED_COLUMNS"
    assert not (temp_workdir / "out" / "bad.normalized.csv").exists()

    lines = error_log.file_path.read_text(encoding="utf-8").strip().splitlines()
    records = [json.loads(line) for line in lines]
    assert records[0]["file"] == "bad.csv"
    assert records[0]["row"] == -1
    assert records[0]["error_type"] == "MISSING_REQUIRED_COLUMNS"


def test_process_all_dropped_rows_go_to_error_log(
    config: ImportConfig, temp_workdir: Path, write_csv, valid_csv_text: str
):
    write_csv("topics.csv", valid_csv_text)
    error_log = ErrorLogBuffer()
    process_all(config, error_log=error_log)
    records = [json.loads(x) for x in error_log.file_path.read_text(encoding="utf-8").splitlines()]
    assert records == [
        {**records[0], "file": "topics.csv", "row": 4, "error_type": "MISSING_TOPIC_OR_PROMPT"}
    ]


def test_process_all_read_error(config: ImportConfig, write_csv):
    write_csv("locked.csv", "topic,prompt\nA,B\n")
    with patch(
        "prompt_import.services.orchestrator.import_file",
        side_effect=PermissionError("permission denied"),
    ):
        result = process_all(config)
    assert result.failed_files == 1
    assert result.file_stats[0].error == "FILE_READ_ERROR"


def test_process_all_missing_source_directory(temp_workdir: Path):
    cfg = ImportConfig(source_directory="./nowhere", output_directory="./out")
    with pytest.raises(ProcessingError):
        process_all(cfg)
