"""Extract usage figures from `btrfs filesystem usage` reports.

Both report modes are scanned line by line and only the first line matching a
label is used. Surrounding lines are ignored, so the parsers tolerate the other
sections of the report (per-profile allocations, device lists, ...).
"""

from __future__ import annotations

import re

from btrfs_usage_monitor.errors import ParseError
from btrfs_usage_monitor.models.usage import HumanUsage, RawUsage

U64_MAX = 2**64 - 1

_RX_DEVICE_SIZE = re.compile(r"Device size:(.*)")
_RX_FREE_RAW = re.compile(r"Free \(estimated\):(.*)\(")
_RX_FREE_HUMAN = re.compile(r"Free \(estimated\):(.*)\(min:(.*)\)")
_RX_UNSIGNED = re.compile(r"\+?[0-9]+")


def extract_raw_usage(text: str) -> RawUsage:
    """Parse the `--raw` report into byte counts.

    A matched but malformed value becomes 0; a missing label raises ParseError.
    """
    device_size = _first_bytes(text, _RX_DEVICE_SIZE, "Device size")
    free = _first_bytes(text, _RX_FREE_RAW, "Free (estimated)")
    return RawUsage(device_size=device_size, free=free)


def extract_human_usage(text: str) -> HumanUsage:
    for line in _lines(text):
        m = _RX_FREE_HUMAN.search(line)
        if m:
            return HumanUsage(free=m.group(1).strip(), free_min=m.group(2).strip())
    raise ParseError("Free (estimated)")


def parse_bytes(value: str) -> int:
    value = value.strip()
    if not _RX_UNSIGNED.fullmatch(value):
        return 0
    n = int(value)
    return n if n <= U64_MAX else 0


def _first_bytes(text: str, rx: re.Pattern[str], field: str) -> int:
    for line in _lines(text):
        m = rx.search(line)
        if m:
            return parse_bytes(m.group(1))
    raise ParseError(field, "raw bytes")


def _lines(text: str) -> list[str]:
    # only \n and \r\n end a line
    return [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]
