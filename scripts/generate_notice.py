#!/usr/bin/env python3
"""Local CLI entrypoint to generate a task's third-party notice.

Usage:
  python scripts/generate_notice.py <task name> [--root .] [--config settings.json] [--strict]

Run from the repository root that holds the Tasks directory.
"""

from __future__ import annotations

from third_party_notice.cli import main


if __name__ == "__main__":
    raise SystemExit(main())
