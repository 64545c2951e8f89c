from __future__ import annotations

import os

import psutil

from btrfs_usage_monitor.models.usage import MountInfo


def find_mount(path: str) -> MountInfo | None:
    """Return the mount holding `path`, or None if it cannot be determined."""
    target = os.path.realpath(path)
    try:
        parts = psutil.disk_partitions(all=True)
    except Exception:
        return None

    best: MountInfo | None = None
    for p in parts:
        mp = str(p.mountpoint)
        if not _is_under(target, mp):
            continue
        if best is None or len(mp) > len(best.mountpoint):
            best = MountInfo(device=str(p.device), mountpoint=mp, fstype=str(p.fstype))
    return best


def _is_under(path: str, mountpoint: str) -> bool:
    if mountpoint == os.sep:
        return path.startswith(os.sep)
    return path == mountpoint or path.startswith(mountpoint.rstrip(os.sep) + os.sep)
