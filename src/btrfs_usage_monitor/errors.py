from __future__ import annotations


class UsageMonitorError(Exception):
    """Base error of a failed usage check."""


class InvocationError(UsageMonitorError):
    """The usage report command could not be run or exited with failure."""

    def __init__(self, command: str, reason: str | None = None) -> None:
        self.command = command
        self.reason = reason
        msg = f"'{command}'"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)


class ParseError(UsageMonitorError):
    """A required field is missing from the usage report text."""

    def __init__(self, field: str, variant: str | None = None) -> None:
        self.field = field
        self.variant = variant
        msg = f"parse error in filesystem data usage: at '{field}'"
        if variant:
            msg = f"{msg} in {variant}"
        super().__init__(msg)
