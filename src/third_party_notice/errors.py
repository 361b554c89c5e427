"""Exception hierarchy shared across the notice pipeline."""

from __future__ import annotations


class NoticeError(RuntimeError):
    """Base class for failures raised while generating a notice."""
