"""Root pytest configuration and shared fixtures."""

from __future__ import annotations

from typing import Callable, Dict, Tuple

import pytest

from tests.helpers.process_test_helper import FakeCommandRunner
from unixproc import pgrep_capability
from unixproc.config import reset_default_values, reset_settings
from unixproc.process_launcher import CommandOutput

_SETTINGS_ENV_VARS = (
    "PROCESS_PROBE_CLEANUP_TIMEOUT_SECONDS",
    "PROCESS_CONSOLE_QUIET",
    "PROCESS_LOG_APPEND",
    "PROCESS_LOG_DIRECTORY",
)


@pytest.fixture(autouse=True)
def _isolate_process_state(monkeypatch):
    """Give every test a fresh pgrep capability and settings."""
    for name in _SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    pgrep_capability._CAPABILITY_CACHE.reset()
    reset_settings()
    reset_default_values()
    yield
    pgrep_capability._CAPABILITY_CACHE.reset()
    reset_settings()
    reset_default_values()


@pytest.fixture
def command_runner(monkeypatch) -> Callable[..., FakeCommandRunner]:
    """Factory that installs a FakeCommandRunner as ``run_command`` in the given modules."""

    def factory(*modules, outputs: Dict[Tuple[str, ...], CommandOutput] | None = None) -> FakeCommandRunner:
        runner = FakeCommandRunner(outputs)
        for module in modules:
            monkeypatch.setattr(module, "run_command", runner)
        return runner

    return factory
