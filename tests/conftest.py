# Shared pytest fixtures
from __future__ import annotations

import tempfile
from pathlib import Path

import pytest

from prompt_import.config.loader import CONFIG_ENV_VAR
from prompt_import.logging.init import reset_logging


@pytest.fixture(autouse=True)
def _clean_logging():
    reset_logging()
    yield
    reset_logging()


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        (p / "data").mkdir()
        (p / "logs").mkdir()
        monkeypatch.chdir(p)
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
        yield p


@pytest.fixture()
def sample_config_yaml() -> str:
    return """source_directory: ./data
output_directory: ./out
delimiter: ","
encoding: utf-8-sig
defaults:
  country: US
  locale: en-US
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "import.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg


@pytest.fixture()
def write_csv(temp_workdir: Path):
    """Write a CSV file into ./data and return its path."""
    def _write(name: str, text: str, encoding: str = "utf-8") -> Path:
        f = temp_workdir / "data" / name
        f.write_bytes(text.encode(encoding))
        return f
    return _write


@pytest.fixture()
def valid_csv_text() -> str:
    return (
        "topic,prompt,country,locale\n"
        'Pricing,"How much does it cost?",US,en-US\n'
        "Features,What can it do?,,\n"
        ",orphan prompt,DE,de-DE\n"
    )
