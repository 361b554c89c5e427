"""Command-line entrypoint: ``third-party-notice <task name>``."""

from __future__ import annotations

import argparse
import os
from pathlib import Path

from .config import ConfigError, load_settings
from .core import generate_notice
from .log import ConsoleLog, NoticeLog

USAGE = "Usage: third-party-notice <task name>"
ROOT_ENV_VAR = "THIRD_PARTY_NOTICE_ROOT"
STRICT_ENV_VAR = "THIRD_PARTY_NOTICE_STRICT"


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in {"1", "true", "yes", "y"}


def parse_args(argv: list[str] | None = None) -> tuple[argparse.Namespace, list[str]]:
    parser = argparse.ArgumentParser(
        prog="third-party-notice",
        description="Generate Tasks/<task>/ThirdPartyNotice.txt from installed npm packages.",
    )
    parser.add_argument("task_name", nargs="?", help="Name of the task directory under Tasks/")
    parser.add_argument(
        "--root",
        type=Path,
        default=Path(os.getenv(ROOT_ENV_VAR) or "."),
        help="Repository root containing the Tasks directory",
    )
    parser.add_argument("--config", type=Path, default=None, help="Settings file (JSON or YAML)")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit non-zero when the notice could not be generated",
    )
    # Arguments after the task name are ignored rather than rejected.
    return parser.parse_known_args(argv)


def main(argv: list[str] | None = None, log: NoticeLog | None = None) -> int:
    args, extra = parse_args(argv)
    log = log or ConsoleLog()
    if extra:
        log.warning(f"Ignoring extra arguments: {' '.join(extra)}")
    strict = args.strict or _env_flag(STRICT_ENV_VAR)

    # Failures exit 0 unless strict mode is on.
    failure_code = 1 if strict else 0

    if not args.task_name:
        log.error(USAGE)
        return failure_code

    try:
        settings = load_settings(args.config)
    except ConfigError as exc:
        log.error(str(exc))
        return failure_code

    outcome = generate_notice(args.task_name, repo_root=args.root, log=log, settings=settings)
    return 0 if outcome.ok else failure_code


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
