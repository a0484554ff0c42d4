from __future__ import annotations

"""Small helpers for inspecting launched processes and exit codes."""

import logging
import shutil
from typing import Any, Optional

logger = logging.getLogger(__name__)

SUCCESS_EXIT_CODE = 0


def process_id(handle: Any) -> int:
    """Return the pid of a launched process."""
    pid = getattr(handle, "pid", None)
    if pid is None:
        raise AttributeError(f"Process handle {handle!r} does not expose a pid")
    return int(pid)


def process_id_or_none(handle: Any) -> Optional[int]:
    """Return the pid of a launched process, or None when the handle has none."""
    try:
        return process_id(handle)
    except (AttributeError, TypeError, ValueError) as exc:
        logger.debug("Unable to read pid from %r: %s", handle, exc)
        return None


def is_successful_exit_code(exit_code: int) -> bool:
    return exit_code == SUCCESS_EXIT_CODE


def is_nonzero_exit_code(exit_code: int) -> bool:
    return exit_code != SUCCESS_EXIT_CODE


def has_successful_exit_code(handle: Any) -> bool:
    """Return True when a finished process exited with status zero."""
    exit_code = getattr(handle, "returncode", None)
    return exit_code is not None and is_successful_exit_code(exit_code)


def which(program: str) -> Optional[str]:
    """Return the absolute path of ``program`` on PATH, or None."""
    return shutil.which(program)


__all__ = [
    "SUCCESS_EXIT_CODE",
    "has_successful_exit_code",
    "is_nonzero_exit_code",
    "is_successful_exit_code",
    "process_id",
    "process_id_or_none",
    "which",
]
