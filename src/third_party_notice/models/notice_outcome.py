"""Outcome of a single notice generation run."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class NoticeOutcome:
    """Result returned by the driver; the caller decides the exit status."""

    task_name: str | None
    output_path: Path | None = None
    package_count: int = 0
    error: str | None = None

    def __post_init__(self) -> None:
        if self.package_count < 0:
            raise ValueError("Package count must be non-negative")
        if self.error is None and self.output_path is None:
            raise ValueError("A successful outcome must carry an output path")

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def failed(cls, task_name: str | None, error: str) -> NoticeOutcome:
        return cls(task_name=task_name, error=error)
