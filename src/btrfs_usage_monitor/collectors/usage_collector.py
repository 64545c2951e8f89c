from __future__ import annotations

import logging

from btrfs_usage_monitor.models.usage import HumanUsage, RawUsage
from btrfs_usage_monitor.parsers.usage_parser import extract_human_usage, extract_raw_usage
from btrfs_usage_monitor.services.mount_service import find_mount
from btrfs_usage_monitor.services.report_provider import BtrfsReportProvider
from btrfs_usage_monitor.services.threshold_service import evaluate

log = logging.getLogger(__name__)


class BtrfsUsageCollector:
    def __init__(self, provider: BtrfsReportProvider | None = None, debug: bool = False) -> None:
        self.provider = provider or BtrfsReportProvider(debug=debug)

    def check(self, path: str, free_limit_percentage: int) -> str | None:
        self._check_mount(path)
        raw = self.usage_raw(path)
        human = self.usage_human(path)
        return evaluate(path, free_limit_percentage, raw, human)

    def usage_raw(self, path: str) -> RawUsage:
        return extract_raw_usage(self.provider.raw_report(path))

    def usage_human(self, path: str) -> HumanUsage:
        return extract_human_usage(self.provider.human_report(path))

    def _check_mount(self, path: str) -> None:
        m = find_mount(path)
        if m is None:
            log.debug("no mount found for %s", path)
        elif m.fstype != "btrfs":
            log.warning("%s is on %s (%s), not btrfs", path, m.mountpoint, m.fstype)


def check_usage(
    path: str,
    free_limit_percentage: int,
    *,
    debug: bool = False,
    provider: BtrfsReportProvider | None = None,
) -> str | None:
    """Return a warning if Btrfs data usage drops below the free limit percentage.

    `debug` only configures the default provider; a given `provider` keeps its
    own debug setting. InvocationError and ParseError propagate to the caller.
    """
    collector = BtrfsUsageCollector(provider=provider, debug=debug)
    return collector.check(path, free_limit_percentage)
