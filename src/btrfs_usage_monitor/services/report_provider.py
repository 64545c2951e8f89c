from __future__ import annotations

import logging
import shlex
import signal
import subprocess

from btrfs_usage_monitor.errors import InvocationError

log = logging.getLogger(__name__)


class BtrfsReportProvider:
    """Runs `btrfs filesystem usage` and returns its report text."""

    def __init__(self, command: str = "btrfs", debug: bool = False) -> None:
        self.command = command
        self.debug = bool(debug)

    def raw_report(self, path: str) -> str:
        return self._run(["filesystem", "usage", "--raw", path])

    def human_report(self, path: str) -> str:
        return self._run(["filesystem", "usage", path])

    def _run(self, args: list[str]) -> str:
        argv = [self.command, *args]
        cmdline = " ".join(shlex.quote(a) for a in argv)

        try:
            # stderr passes through to ours
            proc = subprocess.run(argv, stdout=subprocess.PIPE, check=False)
        except OSError as e:
            raise InvocationError(cmdline) from e

        if proc.returncode != 0:
            raise InvocationError(cmdline, exit_reason(proc.returncode))

        out = proc.stdout.decode("utf-8", errors="replace")
        if self.debug:
            log.debug("'%s':\n%s", cmdline, out)
        return out


def exit_reason(returncode: int) -> str:
    if returncode < 0:
        signum = -returncode
        try:
            return f"signal: {signum} ({signal.Signals(signum).name})"
        except ValueError:
            return f"signal: {signum}"
    return f"exit status: {returncode}"
