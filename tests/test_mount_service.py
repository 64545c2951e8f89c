from __future__ import annotations

from types import SimpleNamespace

import pytest

from btrfs_usage_monitor.models.usage import MountInfo
from btrfs_usage_monitor.services.mount_service import find_mount

PARTS = [
    SimpleNamespace(device="/dev/sda1", mountpoint="/", fstype="ext4"),
    SimpleNamespace(device="/dev/sdb1", mountpoint="/mnt/btrfs", fstype="btrfs"),
    SimpleNamespace(device="/dev/sdc1", mountpoint="/mnt/btrfs-old", fstype="xfs"),
]


@pytest.fixture
def parts(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("psutil.disk_partitions", lambda all=False: PARTS)


@pytest.mark.usefixtures("parts")
def test_longest_mountpoint_wins() -> None:
    assert find_mount("/mnt/btrfs/data") == MountInfo("/dev/sdb1", "/mnt/btrfs", "btrfs")
    assert find_mount("/mnt/btrfs") == MountInfo("/dev/sdb1", "/mnt/btrfs", "btrfs")


@pytest.mark.usefixtures("parts")
def test_sibling_prefix_is_not_a_match() -> None:
    assert find_mount("/mnt/btrfs-old/x").fstype == "xfs"
    assert find_mount("/mnt/btrfsx").fstype == "ext4"


def test_no_partitions() -> None:
    assert find_mount("/mnt/btrfs") is None


def test_psutil_failure_returns_none(monkeypatch: pytest.MonkeyPatch) -> None:
    def boom(all=False):
        raise PermissionError("denied")

    monkeypatch.setattr("psutil.disk_partitions", boom)
    assert find_mount("/mnt/btrfs") is None
