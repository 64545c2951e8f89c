"""Print a warning if Btrfs data usage drops below the free limit percentage.

Usage:

    # btrfs-usage-monitor /mnt/btrfs 10
    WARNING: /mnt/btrfs, free: 752.58GiB (min: 681.47GiB), 9% (limit: 10%)
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from btrfs_usage_monitor.collectors.usage_collector import check_usage
from btrfs_usage_monitor.errors import UsageMonitorError
from btrfs_usage_monitor.services.config_service import ConfigPaths, ConfigService
from btrfs_usage_monitor.services.report_provider import BtrfsReportProvider

EXIT_OK, EXIT_ERROR = 0, 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="btrfs-usage-monitor",
        description="Print a warning if Btrfs data usage drops below the free limit percentage.",
    )
    parser.add_argument("path", help="Btrfs filesystem location")
    parser.add_argument(
        "free_limit_percentage",
        type=int,
        help="Minimum free space percentage; lower values trigger a warning (clamped to 0-100).",
    )
    parser.add_argument("--debug", action="store_true", default=None, help="Echo btrfs command output.")
    parser.add_argument("--config", type=Path, default=None, help="JSON config file.")
    parser.add_argument("--btrfs-command", default=None, help="btrfs executable (default: btrfs).")
    return parser


def setup_logging(level: str) -> None:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.WARNING))


def format_error(err: BaseException) -> str:
    msg = f"error: {err}"
    if err.__cause__ is not None:
        msg = f"{msg}: {err.__cause__}"
    return msg


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    paths = ConfigPaths(path=args.config) if args.config else None
    cfg = ConfigService(paths).config()

    debug = cfg.debug if args.debug is None else args.debug
    command = args.btrfs_command or cfg.btrfs_command
    setup_logging("DEBUG" if debug else cfg.log_level)

    provider = BtrfsReportProvider(command=command, debug=debug)
    try:
        warning = check_usage(args.path, args.free_limit_percentage, provider=provider)
    except UsageMonitorError as e:
        print(format_error(e), file=sys.stderr)
        return EXIT_ERROR

    if warning:
        print(warning)
    return EXIT_OK


def run() -> None:
    raise SystemExit(main())


if __name__ == "__main__":
    run()
