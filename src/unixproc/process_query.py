"""
Find processes with pgrep.

Usage:
    from unixproc.process_query import find_pids, find_pids_with_command, find_single_pid

    pids = find_pids(None, "gunicorn")
    matches = find_pids_with_command("deploy", "java -jar")
"""

from __future__ import annotations

import logging
from typing import List, Optional

from .errors import MultiplicityError
from .pgrep_capability import get_pgrep_flags
from .process_launcher import CommandOutput, run_command
from .process_query_helpers import (
    ProcessMatch,
    build_pgrep_command,
    parse_pid_lines,
    parse_process_matches,
    validate_pgrep_pattern,
)

logger = logging.getLogger(__name__)

FULL_COMMAND_LINE_FLAG = "-f"

# pgrep exits 1 when nothing matched; anything above is a usage or system error
_PGREP_NO_MATCH_EXIT_CODE = 1


def find_pids(user: Optional[str], pattern: str) -> List[int]:
    """Return pids whose full command line matches ``pattern``, optionally owned by ``user``."""
    output = _run_pgrep(build_pgrep_command(user, FULL_COMMAND_LINE_FLAG, pattern))
    return parse_pid_lines(output.stdout_lines)


def find_pids_with_command(user: Optional[str], pattern: str) -> List[ProcessMatch]:
    """Return a :class:`ProcessMatch` for every process matching ``pattern``.

    Uses the flags chosen by the pgrep capability check so that each line
    carries the full command line.
    """
    validate_pgrep_pattern(pattern)
    output = _run_pgrep(build_pgrep_command(user, get_pgrep_flags(), pattern))
    return parse_process_matches(output.stdout_lines)


def find_single_pid(user: Optional[str], pattern: str) -> Optional[int]:
    """
    Return the only pid matching ``pattern``, or None when nothing matches.

    Raises:
        MultiplicityError: If more than one process matches
    """
    pids = find_pids(user, pattern)
    if not pids:
        return None
    if len(pids) > 1:
        raise MultiplicityError.for_matches(f"process matching {pattern!r}", pids)
    return pids[0]


def _run_pgrep(command: List[str]) -> CommandOutput:
    output = run_command(command)
    if output.exit_code is not None and output.exit_code > _PGREP_NO_MATCH_EXIT_CODE:
        logger.warning("%s exited with %s: %s", " ".join(command), output.exit_code, " ".join(output.stderr_lines))
    else:
        logger.debug("%s returned %d line(s)", " ".join(command), len(output.stdout_lines))
    return output


__all__ = [
    "FULL_COMMAND_LINE_FLAG",
    "ProcessMatch",
    "find_pids",
    "find_pids_with_command",
    "find_single_pid",
]
