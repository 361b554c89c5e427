"""Core notice generation entrypoints.

This module MUST NOT parse command-line arguments or decide exit codes so it
can be driven from the CLI wrapper as well as from build tooling directly.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from itertools import chain
from pathlib import Path

from .config import Settings
from .discovery import collect_license_info
from .log import ConsoleLog, NoticeLog, trace
from .models import NoticeOutcome, PackageRecord
from .notice import render_notice, write_lines

MODULES_DIR = "node_modules"
TESTS_DIR = "Tests"


@dataclass(frozen=True)
class TaskPaths:
    """Filesystem locations used for one task."""

    task_dir: Path
    modules_root: Path
    tests_modules_root: Path
    output_path: Path

    @property
    def scan_roots(self) -> tuple[Path, Path]:
        return (self.modules_root, self.tests_modules_root)


def task_paths(repo_root: Path, task_name: str, settings: Settings | None = None) -> TaskPaths:
    settings = settings or Settings()
    task_dir = Path(repo_root).resolve() / settings.tasks_dir / task_name
    return TaskPaths(
        task_dir=task_dir,
        modules_root=task_dir / MODULES_DIR,
        tests_modules_root=task_dir / TESTS_DIR / MODULES_DIR,
        output_path=task_dir / settings.output_name,
    )


def sort_records(records: Iterable[PackageRecord]) -> list[PackageRecord]:
    """Sort by name using code point order; ties keep their scan order."""
    return sorted(records, key=lambda record: record.name)


def generate_notice(
    task_name: str,
    *,
    repo_root: Path | str = ".",
    log: NoticeLog | None = None,
    settings: Settings | None = None,
) -> NoticeOutcome:
    """Scan a task's dependency trees and write its ThirdPartyNotice.txt.

    Params:
        task_name: directory name of the task under ``Tasks/``
        repo_root: repository root holding the ``Tasks`` directory
        log: logging interface; defaults to console output
        settings: optional overrides for license names and layout

    Returns: a NoticeOutcome. Failures are logged once and reported through
    ``outcome.error`` instead of being raised.
    """
    log = log or ConsoleLog()
    settings = settings or Settings()

    try:
        paths = task_paths(repo_root, task_name, settings)
        trace(log, "task path", paths.task_dir)

        licenses = chain.from_iterable(
            collect_license_info(root, log, settings.license_names) for root in paths.scan_roots
        )
        records = sort_records(licenses)

        # The output is only opened once every record has been read.
        with paths.output_path.open("w", encoding="utf-8", newline="") as stream:
            write_lines(stream, render_notice(task_name, records))
    except Exception as exc:
        message = str(exc) or type(exc).__name__
        log.error(message)
        return NoticeOutcome.failed(task_name, message)

    log.info(f"Wrote {len(records)} package notices to {paths.output_path}")
    return NoticeOutcome(
        task_name=task_name,
        output_path=paths.output_path,
        package_count=len(records),
    )
