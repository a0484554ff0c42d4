"""Escalation policies applied when a kill request times out."""

from .timeout_actions import (
    FORCE_KILL_TIMEOUT_SECONDS,
    SIGKILL_EXIT_CODE,
    UNKNOWN_EXIT_CODE,
    TimeoutAction,
    execute_timeout_action,
)

__all__ = [
    "FORCE_KILL_TIMEOUT_SECONDS",
    "SIGKILL_EXIT_CODE",
    "UNKNOWN_EXIT_CODE",
    "TimeoutAction",
    "execute_timeout_action",
]
