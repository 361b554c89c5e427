"""Render the third-party notice document line by line."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable, Iterator, Sequence
from typing import TextIO

from .models import PackageRecord

TITLE = "THIRD-PARTY SOFTWARE NOTICES AND INFORMATION"
DO_NOT_TRANSLATE = "Do Not Translate or Localize"
SEPARATOR = "=" * 41

# Surrounding whitespace, including a byte order mark.
_EDGE_WHITESPACE = re.compile(r"\A[\s\ufeff]+|[\s\ufeff]+\Z")

PREAMBLE = (
    "This Visual Studio Team Services extension ({task_name}) is based on or "
    "incorporates material from the projects listed below (Third Party IP). "
    "The original copyright notice and the license under which Microsoft "
    "received such Third Party IP, are set forth below. Such licenses and "
    "notices are provided for informational purposes only. Microsoft licenses "
    "the Third Party IP to you under the licensing terms for the Visual Studio "
    "Team Services extension. Microsoft reserves all other rights not expressly "
    "granted under this agreement, whether by implication, estoppel or otherwise."
)


def trim_license(text: str) -> str:
    return _EDGE_WHITESPACE.sub("", text)


def index_line(number: int, record: PackageRecord) -> str:
    if record.url:
        return f"{number}.\t{record.name} ({record.url})"
    return f"{number}.\t{record.name}"


def render_notice(task_name: str, records: Sequence[PackageRecord]) -> Iterator[str]:
    """Yield the notice lines for ``records`` in the given order.

    ``records`` is walked twice (index, then license bodies), so it must be
    a sequence rather than a one-shot iterator.
    """
    yield ""
    yield TITLE
    yield DO_NOT_TRANSLATE
    yield ""
    yield PREAMBLE.format(task_name=task_name)
    yield ""

    for number, record in enumerate(records, start=1):
        yield index_line(number, record)

    yield ""
    yield ""

    for record in records:
        yield f"%% {record.name} NOTICES, INFORMATION, AND LICENSE BEGIN HERE"
        yield SEPARATOR
        yield trim_license(record.license_text)
        yield SEPARATOR
        yield f"END OF {record.name} NOTICES, INFORMATION, AND LICENSE"
        yield ""


def write_lines(stream: TextIO, lines: Iterable[str], newline: str = os.linesep) -> int:
    """Write each line followed by ``newline``; return the number written."""
    count = 0
    for line in lines:
        stream.write(line)
        stream.write(newline)
        count += 1
    return count
