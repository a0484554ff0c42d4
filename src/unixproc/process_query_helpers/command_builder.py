"""Build pgrep command lines."""

from __future__ import annotations

from typing import List, Optional

from ..errors import InvalidArgumentError

PGREP_COMMAND = "pgrep"
USER_FLAG = "-u"
PARENT_FLAG = "-P"


def validate_pgrep_pattern(pattern: str) -> None:
    """Raise InvalidArgumentError unless the pattern has something to match."""
    if not isinstance(pattern, str) or not pattern.strip():
        raise InvalidArgumentError(f"pgrep pattern must not be blank (got {pattern!r})")


def build_pgrep_command(user: Optional[str], flags: str, pattern: str) -> List[str]:
    """
    Return ``pgrep [-u user] <flags> <pattern>`` as a list of tokens.

    A blank user means the query is not scoped to a user.

    Raises:
        InvalidArgumentError: If flags are blank or contain whitespace, or the pattern is blank
    """
    if not flags or not flags.strip():
        raise InvalidArgumentError("pgrep flags must not be blank")
    if any(char.isspace() for char in flags):
        raise InvalidArgumentError(f"pgrep flags must be a single token without whitespace (got {flags!r})")
    validate_pgrep_pattern(pattern)

    command = [PGREP_COMMAND]
    if user and user.strip():
        command.extend([USER_FLAG, user])
    command.extend([flags, pattern])
    return command


def build_child_pgrep_command(parent_pid: int) -> List[str]:
    """Return ``pgrep -P <parent_pid>``."""
    if isinstance(parent_pid, bool) or not isinstance(parent_pid, int) or parent_pid < 0:
        raise InvalidArgumentError(f"Parent pid must be a non-negative integer (got {parent_pid!r})")
    return [PGREP_COMMAND, PARENT_FLAG, str(parent_pid)]
