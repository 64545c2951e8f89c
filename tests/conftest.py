from __future__ import annotations

from pathlib import Path

import pytest

DATA_DIR = Path(__file__).parent / "data"


def read_data(name: str) -> str:
    return (DATA_DIR / name).read_text(encoding="utf-8")


class FakeProvider:
    def __init__(self, raw: str, human: str) -> None:
        self.raw = raw
        self.human = human
        self.calls: list[tuple[str, str]] = []

    def raw_report(self, path: str) -> str:
        self.calls.append(("raw", path))
        return self.raw

    def human_report(self, path: str) -> str:
        self.calls.append(("human", path))
        return self.human


@pytest.fixture(autouse=True)
def _no_mounts(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("psutil.disk_partitions", lambda all=False: [])
