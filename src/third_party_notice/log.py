"""Logging interface passed explicitly to every pipeline component."""

from __future__ import annotations

import sys
from typing import Protocol, TextIO, TypeVar

T = TypeVar("T")


class NoticeLog(Protocol):
    def info(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...


class ConsoleLog:
    """Print ``[LEVEL] message`` lines; errors go to stderr."""

    def __init__(self, out: TextIO | None = None, err: TextIO | None = None) -> None:
        self._out = out
        self._err = err

    def info(self, message: str) -> None:
        print(f"[INFO] {message}", file=self._out or sys.stdout)

    def warning(self, message: str) -> None:
        print(f"[WARNING] {message}", file=self._out or sys.stdout)

    def error(self, message: str) -> None:
        print(f"[ERROR] {message}", file=self._err or sys.stderr)


def trace(log: NoticeLog, label: str, value: T) -> T:
    """Log ``label: value`` and pass the value through."""
    log.info(f"{label}: {value}")
    return value
