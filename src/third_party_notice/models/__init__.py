"""Data models for the third-party notice generator."""

from __future__ import annotations

from .notice_outcome import NoticeOutcome
from .package_record import NO_LICENSE_FOUND, PackageRecord

__all__ = [
    "NO_LICENSE_FOUND",
    "NoticeOutcome",
    "PackageRecord",
]
