from __future__ import annotations

from btrfs_usage_monitor.models.usage import HumanUsage, RawUsage


def clamp_percentage(value: int) -> int:
    return max(0, min(int(value), 100))


def free_percentage(raw: RawUsage) -> int:
    # multiply first, truncating integer division
    return min((raw.free * 100) // raw.device_size, 100)


def evaluate(
    path: str,
    threshold_percent: int,
    raw: RawUsage,
    human: HumanUsage,
) -> str | None:
    """Return a warning if free space is below the threshold percentage.

    A zero device size yields an ERROR line instead of a warning. Returns None
    when free space is at or above the threshold.
    """
    threshold = clamp_percentage(threshold_percent)

    if raw.device_size == 0:
        return f"ERROR: {path}: device size is 0"

    pct = free_percentage(raw)
    if pct < threshold:
        return (
            f"WARNING: {path}, free: {human.free} (min: {human.free_min}), "
            f"{pct}% (limit: {threshold}%)"
        )
    return None
