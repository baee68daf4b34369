from __future__ import annotations

import codecs
import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

from ..models.import_record import DEFAULT_COUNTRY, DEFAULT_LOCALE, RecordDefaults

"""Config loader.

Responsibilities:
- Load YAML config (default ``config/import.yml``, overridable through the
  PROMPT_IMPORT_CONFIG environment variable)
- Validate against config_schema.json (shipped next to this module)
- Apply defaults (delimiter ",", encoding utf-8-sig, US / en-US)
"""

__all__ = [
    "CONFIG_ENV_VAR",
    "DEFAULT_CONFIG_PATH",
    "SCHEMA_PATH",
    "ConfigError",
    "ImportConfig",
    "load_config",
    "resolve_config_path",
]

SCHEMA_PATH = Path(__file__).parent / "config_schema.json"
DEFAULT_CONFIG_PATH = Path("config/import.yml")
CONFIG_ENV_VAR = "PROMPT_IMPORT_CONFIG"


class ConfigError(Exception):
    pass


@dataclass(frozen=True)
class ImportConfig:
    source_directory: str  # 取込対象 CSV のディレクトリ
    output_directory: str  # 正規化済 CSV の出力先
    delimiter: str = ","
    encoding: str = "utf-8-sig"
    defaults: RecordDefaults = field(default_factory=RecordDefaults)


def resolve_config_path(explicit: Path | None = None) -> Path:
    if explicit is not None:
        return explicit
    env_path = os.getenv(CONFIG_ENV_VAR)
    return Path(env_path) if env_path else DEFAULT_CONFIG_PATH


def _validate_config_schema(data: dict[str, Any]) -> None:
    """Validate config data against the JSON schema.

    Raises:
        ConfigError: If the schema file is missing or unreadable, or the data
            fails validation (missing keys, wrong types, unknown keys)
    """
    if not SCHEMA_PATH.exists():
        raise ConfigError(f"config schema not found: {SCHEMA_PATH}")

    try:
        schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
        jsonschema.validate(data, schema)
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid schema file: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"config validation failed: {e.message}") from e


def load_config(path: Path) -> ImportConfig:
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"config root must be a mapping: {path}")

    _validate_config_schema(data)

    encoding = data.get("encoding", "utf-8-sig")
    try:
        codecs.lookup(encoding)
    except LookupError as e:
        raise ConfigError(f"unknown encoding: {encoding}") from e

    defaults_raw = data.get("defaults", {})
    return ImportConfig(
        source_directory=data["source_directory"],
        output_directory=data["output_directory"],
        delimiter=data.get("delimiter", ","),
        encoding=encoding,
        defaults=RecordDefaults(
            country=defaults_raw.get("country", DEFAULT_COUNTRY),
            locale=defaults_raw.get("locale", DEFAULT_LOCALE),
        ),
    )
