"""Read an installed package's package.json and extract its repository URL."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from ..errors import NoticeError
from ..log import NoticeLog

MANIFEST_NAME = "package.json"


class ManifestError(NoticeError):
    """Raised when a package.json cannot be parsed into an object."""


class MissingRepositoryUrlError(ManifestError):
    """Raised when a package.json has no ``repository`` field."""


def read_utf8(path: Path) -> str:
    """Decode a file as UTF-8, replacing invalid bytes and keeping line endings."""
    return Path(path).read_bytes().decode("utf-8", errors="replace")


def read_manifest(package_dir: Path, log: NoticeLog) -> dict[str, Any]:
    """Return the parsed package.json of ``package_dir``.

    Missing files propagate as ``OSError``; malformed JSON and non-object
    documents raise ``ManifestError``.
    """
    log.info(f"Reading the package.json for {package_dir} ...")
    path = Path(package_dir) / MANIFEST_NAME
    content = read_utf8(path)

    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        raise ManifestError(f"Invalid JSON in {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ManifestError(f"{path} must contain a JSON object")

    return data


def repository_url(manifest: dict[str, Any], package_dir: Path) -> str | None:
    """Return ``repository.url`` from a parsed manifest.

    A missing or null ``repository`` aborts the scan. The npm string
    shorthand (``"github:user/repo"``) carries no ``url`` and yields None.
    """
    repository = manifest.get("repository")
    if repository is None:
        raise MissingRepositoryUrlError(
            f"Missing repository URL in {Path(package_dir) / MANIFEST_NAME}"
        )

    if isinstance(repository, dict):
        url = repository.get("url")
        return str(url) if url is not None else None

    return None
