"""Shared pytest fixtures for third-party-notice tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest


class RecordingLog:
    """NoticeLog fake that keeps every message per level."""

    def __init__(self) -> None:
        self.infos: list[str] = []
        self.warnings: list[str] = []
        self.errors: list[str] = []

    def info(self, message: str) -> None:
        self.infos.append(message)

    def warning(self, message: str) -> None:
        self.warnings.append(message)

    def error(self, message: str) -> None:
        self.errors.append(message)


@pytest.fixture
def log() -> RecordingLog:
    return RecordingLog()


def make_package(
    modules_root: Path,
    name: str,
    manifest: dict | None = None,
    license_files: dict[str, str] | None = None,
) -> Path:
    """Create ``modules_root/<name>`` with a package.json and license files."""
    package_dir = modules_root / name
    package_dir.mkdir(parents=True)
    if manifest is None:
        manifest = {"name": name, "repository": {"url": f"https://example.com/{name}"}}
    (package_dir / "package.json").write_text(json.dumps(manifest), encoding="utf-8")
    for filename, text in (license_files or {}).items():
        (package_dir / filename).write_text(text, encoding="utf-8")
    return package_dir


@pytest.fixture
def package_factory():
    return make_package
