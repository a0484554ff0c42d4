"""What to do when ``kill`` has not finished within its timeout."""

from __future__ import annotations

import logging
import signal
from enum import Enum
from typing import Callable, Dict, Optional

import psutil

from ..errors import InvalidArgumentError, KillEscalationError, KillTimeoutError

logger = logging.getLogger(__name__)

# Grace period for the target to disappear after SIGKILL
FORCE_KILL_TIMEOUT_SECONDS = 1.0

# Returned when the outcome of the kill could not be confirmed
UNKNOWN_EXIT_CODE = -1

# Shell convention for a process ended by SIGKILL
SIGKILL_EXIT_CODE = 128 + signal.SIGKILL.value


class TimeoutAction(Enum):
    """Escalation policy for a kill request that did not finish in time."""

    FORCE_KILL = "force_kill"
    NO_OP = "no_op"
    THROW_EXCEPTION = "throw_exception"


def force_kill(pid: int, timeout: float) -> int:
    """
    SIGKILL the target directly and wait for it to disappear.

    Returns:
        The target's exit code when psutil can observe it (our own child),
        otherwise ``SIGKILL_EXIT_CODE``

    Raises:
        KillEscalationError: If the target is still alive after the grace period
                             or may not be signalled by this user
    """
    logger.warning("Kill of process %s timed out after %ss; sending SIGKILL", pid, timeout)
    try:
        target = psutil.Process(pid)
        target.kill()
        exit_code = target.wait(timeout=FORCE_KILL_TIMEOUT_SECONDS)
    except psutil.NoSuchProcess:
        logger.info("Process %s no longer exists", pid)
        return SIGKILL_EXIT_CODE
    except psutil.AccessDenied as exc:
        raise KillEscalationError.access_denied(pid, FORCE_KILL_TIMEOUT_SECONDS) from exc
    except psutil.TimeoutExpired as exc:
        raise KillEscalationError.not_killed(pid, FORCE_KILL_TIMEOUT_SECONDS) from exc

    logger.info("Process %s force killed", pid)
    return _as_shell_exit_code(exit_code)


def ignore_timeout(pid: int, timeout: float) -> int:
    """Log the timeout and report that the outcome is unknown."""
    logger.warning("Process %s did not end before timeout of %ss; taking no further action", pid, timeout)
    return UNKNOWN_EXIT_CODE


def raise_timeout(pid: int, timeout: float) -> int:
    raise KillTimeoutError.for_pid(pid, timeout)


def _as_shell_exit_code(exit_code: Optional[int]) -> int:
    if exit_code is None:
        return SIGKILL_EXIT_CODE
    # psutil reports death by signal N as -N
    if exit_code < 0:
        return 128 - int(exit_code)
    return int(exit_code)


_TimeoutHandler = Callable[[int, float], int]

_HANDLERS: Dict[TimeoutAction, _TimeoutHandler] = {
    TimeoutAction.FORCE_KILL: force_kill,
    TimeoutAction.NO_OP: ignore_timeout,
    TimeoutAction.THROW_EXCEPTION: raise_timeout,
}

_unhandled = set(TimeoutAction) - set(_HANDLERS)
if _unhandled:
    raise RuntimeError(f"Timeout actions without a handler: {sorted(action.name for action in _unhandled)}")


def execute_timeout_action(action: TimeoutAction, pid: int, timeout: float) -> int:
    """
    Run the handler for ``action`` against the target ``pid``.

    Raises:
        InvalidArgumentError: If ``action`` is not a TimeoutAction
        KillTimeoutError: For ``THROW_EXCEPTION``
        KillEscalationError: When ``FORCE_KILL`` cannot confirm the kill
    """
    handler = _HANDLERS.get(action) if isinstance(action, TimeoutAction) else None
    if handler is None:
        raise InvalidArgumentError(f"Unsupported timeout action: {action!r}")
    return handler(pid, timeout)
