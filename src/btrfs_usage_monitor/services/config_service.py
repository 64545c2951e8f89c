from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

ENV_DEBUG = "BTRFS_USAGE_MONITOR_DEBUG"
ENV_LOG_LEVEL = "LOG_LEVEL"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class MonitorConfig:
    debug: bool = False
    btrfs_command: str = "btrfs"
    log_level: str = "WARNING"


@dataclass(frozen=True)
class ConfigPaths:
    path: Path


class ConfigService:
    def __init__(self, paths: ConfigPaths | None = None) -> None:
        self.paths = paths or ConfigPaths(path=self.default_path())

    @staticmethod
    def default_path() -> Path:
        xdg = os.environ.get("XDG_CONFIG_HOME")
        if xdg:
            base = Path(xdg)
        else:
            base = Path.home() / ".config"
        return base / "btrfs_usage_monitor" / "config.json"

    def load(self) -> dict[str, Any]:
        p = self.paths.path
        if not p.exists():
            return {}
        try:
            with open(p, "r", encoding="utf-8") as f:
                obj = json.load(f)
            return obj if isinstance(obj, dict) else {}
        except Exception:
            return {}

    def config(self) -> MonitorConfig:
        """Merge defaults, the config file and environment overrides."""
        cfg = self.load()
        defaults = MonitorConfig()

        debug = _as_bool(cfg.get("debug"), defaults.debug)
        env_debug = os.environ.get(ENV_DEBUG)
        if env_debug is not None:
            debug = _as_bool(env_debug, defaults.debug)

        command = cfg.get("btrfs_command")
        if not isinstance(command, str) or not command.strip():
            command = defaults.btrfs_command

        level = os.environ.get(ENV_LOG_LEVEL) or cfg.get("log_level") or defaults.log_level

        return MonitorConfig(
            debug=debug,
            btrfs_command=command.strip(),
            log_level=str(level).upper(),
        )


def _as_bool(value: Any, default: bool) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in _TRUTHY
    return default
