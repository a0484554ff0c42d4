"""Find the direct children of a process with ``pgrep -P``."""

from __future__ import annotations

import logging
from typing import List, Optional

from .errors import MultiplicityError
from .process_launcher import run_command
from .process_query_helpers import build_child_pgrep_command, non_blank_lines, parse_pid_lines

logger = logging.getLogger(__name__)


def find_child_pids(parent_pid: int) -> List[int]:
    """Return the pids of the direct children of ``parent_pid``; empty when it has none."""
    return parse_pid_lines(_child_lines(parent_pid))


def find_single_child_pid(parent_pid: int) -> Optional[int]:
    """
    Return the pid of the only child of ``parent_pid``, or None when it has no children.

    Raises:
        MultiplicityError: If the process has more than one child
    """
    lines = _child_lines(parent_pid)
    if not lines:
        return None
    if len(lines) > 1:
        raise MultiplicityError.for_matches(f"child of process {parent_pid}", [line.strip() for line in lines])
    return parse_pid_lines(lines)[0]


def _child_lines(parent_pid: int) -> List[str]:
    command = build_child_pgrep_command(parent_pid)
    lines = non_blank_lines(run_command(command).stdout_lines)
    logger.debug("Process %s has %d direct child(ren)", parent_pid, len(lines))
    return lines


__all__ = ["find_child_pids", "find_single_child_pid"]
