from __future__ import annotations

import os
from typing import Iterable, Sequence

import pytest

from core.domain.models import ToolCheck, ToolInvocation


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    """Keep NETPULSE_* variables and stray .env files out of every test."""

    for key in list(os.environ):
        if key.upper().startswith("NETPULSE_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.chdir(tmp_path)


class FakeRunner:
    """Records argv of every call into a shared event list."""

    def __init__(self, events: list | None = None, returncode: int = 0) -> None:
        self.events = events if events is not None else []
        self.returncode = returncode
        self.calls: list[list[str]] = []

    def run(self, tool: str, argv: Sequence[str]) -> ToolInvocation:
        self.calls.append(list(argv))
        self.events.append(("run", list(argv)))
        return ToolInvocation(tool=tool, argv=list(argv), returncode=self.returncode)


class FakeSleep:
    def __init__(self, events: list | None = None) -> None:
        self.events = events if events is not None else []
        self.total = 0.0

    def __call__(self, seconds: float) -> None:
        self.total += seconds
        self.events.append(("sleep", seconds))


def all_present(names: Iterable[str]) -> list[ToolCheck]:
    return [ToolCheck(name=n, path=f"/usr/sbin/{n}") for n in names]


@pytest.fixture
def events() -> list:
    return []


@pytest.fixture
def fake_runner(events) -> FakeRunner:
    return FakeRunner(events)


@pytest.fixture
def fake_sleep(events) -> FakeSleep:
    return FakeSleep(events)
