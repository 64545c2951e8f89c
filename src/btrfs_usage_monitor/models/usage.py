from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RawUsage:
    """Btrfs data usage in bytes, from `btrfs filesystem usage --raw`."""

    device_size: int
    free: int


@dataclass(frozen=True)
class HumanUsage:
    """Human readable Btrfs data usage (e.g. 752.58GiB)."""

    free: str
    free_min: str


@dataclass(frozen=True)
class MountInfo:
    device: str
    mountpoint: str
    fstype: str
