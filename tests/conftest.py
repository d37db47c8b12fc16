"""Root pytest configuration and shared fixtures."""

from __future__ import annotations

from typing import Sequence

import pytest

from pidlist.config import PowerShellConfig, runtime
from pidlist.models import CommandResult


class FakeCommandRunner:
    """Command runner that replays canned results in call order."""

    def __init__(self, *results: CommandResult):
        self._results = list(results)
        self.calls: list[dict] = []

    async def run(
        self,
        executable: str,
        arguments: Sequence[str],
        *,
        hide_window: bool = False,
        verbatim_arguments: bool = False,
    ) -> CommandResult:
        self.calls.append(
            {
                "executable": executable,
                "arguments": list(arguments),
                "hide_window": hide_window,
                "verbatim_arguments": verbatim_arguments,
            }
        )
        if not self._results:
            raise AssertionError(f"Unexpected command: {executable} {list(arguments)}")
        return self._results.pop(0)


@pytest.fixture(autouse=True)
def isolate_runtime_config(monkeypatch):
    """Keep .env files and PIDLIST_* variables on the host out of tests."""
    for name in ("PIDLIST_POWERSHELL_EXECUTABLE", "PIDLIST_HIDE_WINDOW", "PIDLIST_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(runtime, "_DEFAULT_VALUES", {})
    yield


@pytest.fixture
def powershell_config() -> PowerShellConfig:
    return PowerShellConfig(executable="powershell", hide_window=True)


@pytest.fixture
def make_runner():
    return FakeCommandRunner
