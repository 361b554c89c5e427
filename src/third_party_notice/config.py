"""Settings loader for the notice generator.

Settings come from an optional JSON or YAML file. The path is taken from the
explicit argument, then the ``THIRD_PARTY_NOTICE_CONFIG`` environment
variable; when neither is set the built-in defaults apply. Documents are
validated against ``SETTINGS_SCHEMA`` before use.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from jsonschema import Draft202012Validator

from .errors import NoticeError

CONFIG_PATH_ENV_VAR = "THIRD_PARTY_NOTICE_CONFIG"

DEFAULT_LICENSE_NAMES = ("LICENSE", "LICENSE.md", "LICENSE.txt")
DEFAULT_TASKS_DIR = "Tasks"
DEFAULT_OUTPUT_NAME = "ThirdPartyNotice.txt"

SETTINGS_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "licenseNames": {
            "type": "array",
            "items": {"type": "string", "minLength": 1},
            "minItems": 1,
            "uniqueItems": True,
        },
        "tasksDir": {"type": "string", "minLength": 1},
        "outputName": {"type": "string", "minLength": 1},
    },
}


class ConfigError(NoticeError):
    """Raised when the settings file cannot be loaded or is invalid."""


@dataclass(slots=True, frozen=True)
class Settings:
    """Top-level settings container."""

    license_names: tuple[str, ...] = DEFAULT_LICENSE_NAMES
    tasks_dir: str = DEFAULT_TASKS_DIR
    output_name: str = DEFAULT_OUTPUT_NAME

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Settings:
        return cls(
            license_names=tuple(data.get("licenseNames", DEFAULT_LICENSE_NAMES)),
            tasks_dir=data.get("tasksDir", DEFAULT_TASKS_DIR),
            output_name=data.get("outputName", DEFAULT_OUTPUT_NAME),
        )


def _resolve_config_path(path: Path | str | None = None) -> Path | None:
    if path is not None:
        return Path(path)

    env_path = os.environ.get(CONFIG_PATH_ENV_VAR)
    if env_path:
        return Path(env_path)

    return None


def _parse_document(config_path: Path, content: str) -> Any:
    if config_path.suffix.lower() in {".yaml", ".yml"}:
        try:
            return yaml.safe_load(content)
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in configuration file: {exc}") from exc

    try:
        return json.loads(content)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in configuration file: {exc}") from exc


def _format_errors(errors: list[Any]) -> str:
    messages = []
    for error in errors:
        pointer = "/".join(str(p) for p in error.path)
        messages.append(f"{pointer or '<root>'}: {error.message}")
    return "; ".join(messages)


def load_settings(path: Path | str | None = None) -> Settings:
    """Load and validate settings.

    Args:
        path: Optional path to the settings file. If not provided, uses the
            THIRD_PARTY_NOTICE_CONFIG env var or falls back to the defaults.

    Returns:
        A validated Settings object.

    Raises:
        ConfigError: If the file cannot be read or contains invalid data.
    """
    config_path = _resolve_config_path(path)
    if config_path is None:
        return Settings()

    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        content = config_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read configuration file: {exc}") from exc

    data = _parse_document(config_path, content)
    if data is None:
        data = {}

    validator = Draft202012Validator(SETTINGS_SCHEMA)
    errors = sorted(validator.iter_errors(data), key=lambda e: [str(p) for p in e.path])
    if errors:
        raise ConfigError(f"Invalid configuration in {config_path}: {_format_errors(errors)}")

    return Settings.from_dict(data)
