"""Walk npm installation trees and collect per-package license information."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator
from pathlib import Path

from .config import DEFAULT_LICENSE_NAMES
from .log import NoticeLog, trace
from .models import NO_LICENSE_FOUND, PackageRecord
from .parsers.package_json import read_manifest, read_utf8, repository_url

SCOPE_PREFIX = "@"
BIN_DIR = ".bin"


def _list_dir(path: Path) -> list[str]:
    # os.listdir order is filesystem-dependent; sort for reproducible output.
    return sorted(os.listdir(path))


def find_license(
    package_dir: Path,
    log: NoticeLog,
    license_names: Iterable[str] = DEFAULT_LICENSE_NAMES,
) -> Path | None:
    """Return the absolute path of the package's license file, or None.

    Matching is case-insensitive against ``license_names``. When several
    entries match, the first in listing order wins and a warning is logged.
    """
    log.info(f"Finding the license for {package_dir}")
    wanted = {name.lower() for name in license_names}
    candidates = [child for child in _list_dir(package_dir) if child.lower() in wanted]

    if not candidates:
        log.warning(f"Could not find a license for {package_dir}")
        return None

    if len(candidates) > 1:
        log.warning(f"Found multiple license files for {package_dir}: {', '.join(candidates)}")

    return trace(log, "Found license", Path(package_dir).resolve() / candidates[0])


def _package_name(package_dir: Path) -> str:
    parent = package_dir.parent.name
    if parent.startswith(SCOPE_PREFIX):
        # e.g. @types/node
        return f"{parent}/{package_dir.name}"
    return package_dir.name


def collect_license_info(
    modules_root: Path,
    log: NoticeLog,
    license_names: Iterable[str] = DEFAULT_LICENSE_NAMES,
) -> Iterator[PackageRecord]:
    """Lazily yield a PackageRecord per package installed under ``modules_root``.

    Scope directories (``@owner``) are descended into; ``.bin`` and plain
    files are skipped. Records come out in listing order, unsorted.
    """
    modules_root = Path(modules_root)
    license_names = tuple(license_names)

    for child in _list_dir(modules_root):
        package_dir = modules_root / child
        log.info(f"Collecting license information from {package_dir} ...")

        if child.startswith(SCOPE_PREFIX):
            yield from collect_license_info(package_dir, log, license_names)
            continue

        name = _package_name(package_dir)
        if name == BIN_DIR:
            continue
        if not package_dir.is_dir():
            continue

        manifest = read_manifest(package_dir, log)
        license_path = find_license(package_dir, log, license_names)
        if license_path is not None:
            license_text = read_utf8(license_path)
        else:
            license_text = NO_LICENSE_FOUND

        yield PackageRecord(
            name=name,
            url=repository_url(manifest, package_dir),
            license_text=license_text,
        )
