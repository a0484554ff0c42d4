"""
Send signals to processes through the ``kill`` command.

The signal is delivered by a short-lived ``kill`` helper process. When the
helper finishes in time its own exit code is returned, which tells whether
the signal could be sent; it is not the target's exit code. When it does not
finish in time the caller's :class:`TimeoutAction` decides what happens next.

Usage:
    from unixproc.kill_signal import KillSignal
    from unixproc.process_killer import TimeoutAction, kill

    exit_code = kill(4242, KillSignal.SIGTERM, TimeoutAction.FORCE_KILL)
"""

from __future__ import annotations

import logging

import psutil

from .errors import InvalidArgumentError
from .kill_signal import KillSignal, with_leading_dash
from .process_killer_helpers import (
    FORCE_KILL_TIMEOUT_SECONDS,
    SIGKILL_EXIT_CODE,
    UNKNOWN_EXIT_CODE,
    TimeoutAction,
    execute_timeout_action,
)
from .process_launcher import close_streams, launch, wait_for_exit

logger = logging.getLogger(__name__)

DEFAULT_KILL_TIMEOUT_SECONDS = 5.0
KILL_COMMAND = "kill"


def kill(
    pid: int,
    signal: KillSignal | str | int,
    action: TimeoutAction,
    timeout: float = DEFAULT_KILL_TIMEOUT_SECONDS,
) -> int:
    """
    Send ``signal`` to ``pid`` by running ``kill -<signal> <pid>``.

    Args:
        pid: Target process id; must be positive
        signal: A KillSignal, or a signal number with or without its leading dash
        action: What to do if the kill helper has not exited within ``timeout``
        timeout: Seconds to wait for the kill helper

    Returns:
        The kill helper's exit code, or the result of ``action`` on timeout

    Raises:
        InvalidArgumentError: If pid or timeout are invalid (nothing is spawned)
        LaunchError: If the kill helper cannot be started
        KillTimeoutError: On timeout with ``TimeoutAction.THROW_EXCEPTION``
        KillEscalationError: When ``TimeoutAction.FORCE_KILL`` cannot confirm the kill
    """
    _validate_pid(pid)
    if timeout < 0:
        raise InvalidArgumentError(f"Kill timeout must be non-negative (got {timeout})")

    signal_flag = with_leading_dash(signal)
    logger.debug("Sending signal %s to process %s", signal_flag, pid)
    killer_process = launch([KILL_COMMAND, signal_flag, str(pid)])
    return kill_internal(pid, killer_process, timeout, action)


def kill_internal(pid: int, killer_process: psutil.Popen, timeout: float, action: TimeoutAction) -> int:
    """Wait for an already launched kill helper and escalate when it times out."""
    try:
        exit_code = wait_for_exit(killer_process, timeout)
    finally:
        close_streams(killer_process)
    if exit_code is not None:
        return exit_code
    return execute_timeout_action(action, pid, timeout)


def _validate_pid(pid: int) -> None:
    # kill treats 0 and negative pids as process groups
    if isinstance(pid, bool) or not isinstance(pid, int) or pid <= 0:
        raise InvalidArgumentError(f"Process id must be a positive integer (got {pid!r})")


__all__ = [
    "DEFAULT_KILL_TIMEOUT_SECONDS",
    "FORCE_KILL_TIMEOUT_SECONDS",
    "KILL_COMMAND",
    "SIGKILL_EXIT_CODE",
    "UNKNOWN_EXIT_CODE",
    "TimeoutAction",
    "kill",
    "kill_internal",
]
