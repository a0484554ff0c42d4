"""Tests for the kill timeout escalation policies."""

import psutil
import pytest

from tests.helpers.process_test_helper import timeout_expired
from unixproc.errors import InvalidArgumentError, KillEscalationError, KillTimeoutError
from unixproc.process_killer_helpers import timeout_actions
from unixproc.process_killer_helpers.timeout_actions import (
    FORCE_KILL_TIMEOUT_SECONDS,
    SIGKILL_EXIT_CODE,
    UNKNOWN_EXIT_CODE,
    TimeoutAction,
    execute_timeout_action,
    force_kill,
)

TARGET_PID = 2970


class _FakeTarget:
    def __init__(self, wait_result=None, kill_error=None):
        self.wait_result = wait_result
        self.kill_error = kill_error
        self.kill_calls = 0
        self.wait_timeouts = []

    def kill(self):
        self.kill_calls += 1
        if self.kill_error is not None:
            raise self.kill_error

    def wait(self, timeout=None):
        self.wait_timeouts.append(timeout)
        if isinstance(self.wait_result, BaseException):
            raise self.wait_result
        return self.wait_result


@pytest.fixture
def target(monkeypatch):
    fake = _FakeTarget()
    pids = []

    def fake_process(pid):
        pids.append(pid)
        return fake

    monkeypatch.setattr(timeout_actions.psutil, "Process", fake_process)
    fake.pids = pids
    return fake


class TestForceKill:
    def test_unobservable_exit_code_reports_sigkill(self, target) -> None:
        assert force_kill(TARGET_PID, 5.0) == SIGKILL_EXIT_CODE == 137
        assert target.pids == [TARGET_PID]
        assert target.kill_calls == 1
        assert target.wait_timeouts == [FORCE_KILL_TIMEOUT_SECONDS]

    def test_signal_exit_converted_to_shell_convention(self, target) -> None:
        target.wait_result = -9
        assert force_kill(TARGET_PID, 5.0) == 137

    def test_plain_exit_code_kept(self, target) -> None:
        target.wait_result = 3
        assert force_kill(TARGET_PID, 5.0) == 3

    def test_vanished_target_counts_as_killed(self, target) -> None:
        target.kill_error = psutil.NoSuchProcess(TARGET_PID)
        assert force_kill(TARGET_PID, 5.0) == SIGKILL_EXIT_CODE

    def test_survivor_requires_manual_intervention(self, target) -> None:
        target.wait_result = timeout_expired(FORCE_KILL_TIMEOUT_SECONDS, TARGET_PID)

        with pytest.raises(KillEscalationError, match="2970") as excinfo:
            force_kill(TARGET_PID, 5.0)

        assert "manual intervention" in str(excinfo.value)
        assert isinstance(excinfo.value.__cause__, psutil.TimeoutExpired)

    def test_access_denied(self, target) -> None:
        target.kill_error = psutil.AccessDenied(TARGET_PID)

        with pytest.raises(KillEscalationError, match="2970"):
            force_kill(TARGET_PID, 5.0)


class TestExecuteTimeoutAction:
    def test_no_op(self, caplog) -> None:
        with caplog.at_level("WARNING", logger="unixproc.process_killer_helpers.timeout_actions"):
            assert execute_timeout_action(TimeoutAction.NO_OP, TARGET_PID, 5.0) == UNKNOWN_EXIT_CODE
        assert "2970" in caplog.text

    def test_throw(self) -> None:
        with pytest.raises(KillTimeoutError) as excinfo:
            execute_timeout_action(TimeoutAction.THROW_EXCEPTION, TARGET_PID, 5.0)
        assert "2970" in str(excinfo.value)
        assert "5" in str(excinfo.value)

    def test_force_kill_dispatches_to_target(self, target) -> None:
        target.wait_result = -9
        assert execute_timeout_action(TimeoutAction.FORCE_KILL, TARGET_PID, 5.0) == 137
        assert target.pids == [TARGET_PID]

    @pytest.mark.parametrize("action", ["no_op", None, 1])
    def test_rejects_unknown_actions(self, action) -> None:
        with pytest.raises(InvalidArgumentError):
            execute_timeout_action(action, TARGET_PID, 5.0)

    def test_every_action_has_a_handler(self) -> None:
        assert set(timeout_actions._HANDLERS) == set(TimeoutAction)
