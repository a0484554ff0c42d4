"""Exception hierarchy for process control.

Every error derives from :class:`ProcessControlError` and from the closest
builtin exception, so callers may catch either.

Exception classes support two patterns:
1. No-argument raise: raise InvalidArgumentError()
2. Contextual attributes: err = KillTimeoutError("...", pid=42, timeout=5); raise err
"""

from __future__ import annotations

from typing import Any, Sequence


class ProcessControlError(Exception):
    """Base exception for all process control errors.

    Supports keyword arguments that are stored as attributes for debugging.
    """

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = self.__class__.__doc__ or "Process control error occurred"
        super().__init__(message)
        for key, value in kwargs.items():
            setattr(self, key, value)


class LaunchError(ProcessControlError, OSError):
    """The operating system refused to create a process."""

    @classmethod
    def for_command(cls, command: Sequence[str]) -> "LaunchError":
        """Create error for a command that could not be started."""
        tokens = list(command)
        return cls(f"Error launching command: {tokens}", command=tokens)


class InvalidArgumentError(ProcessControlError, ValueError):
    """An argument failed validation before any process was spawned."""


class PidParseError(ProcessControlError, ValueError):
    """A pgrep output line did not start with a valid pid."""

    @classmethod
    def for_line(cls, line: str) -> "PidParseError":
        """Create error for an output line whose pid token is not an integer."""
        return cls(f"Unable to parse a pid from line: {line!r}", line=line)


class MultiplicityError(ProcessControlError):
    """A query that expects at most one result found several."""

    @classmethod
    def for_matches(cls, description: str, matches: Sequence[Any]) -> "MultiplicityError":
        """Create error listing every match that was found."""
        found = list(matches)
        return cls(
            f"Expected at most one {description} but found {len(found)}: {found}",
            matches=found,
        )


class KillTimeoutError(ProcessControlError, TimeoutError):
    """A termination request did not finish before its timeout."""

    @classmethod
    def for_pid(cls, pid: int, timeout: float) -> "KillTimeoutError":
        """Create error for a kill that did not complete in time."""
        return cls(f"Process {pid} did not end before timeout of {timeout} seconds", pid=pid, timeout=timeout)


class KillEscalationError(ProcessControlError, RuntimeError):
    """Force kill could not confirm that the target process ended."""

    @classmethod
    def not_killed(cls, pid: int, timeout: float) -> "KillEscalationError":
        """Create error for a process still alive after SIGKILL."""
        return cls(
            f"Process {pid} was not killed before {timeout:g} second timeout expired; manual intervention required",
            pid=pid,
            timeout=timeout,
        )

    @classmethod
    def access_denied(cls, pid: int, timeout: float) -> "KillEscalationError":
        """Create error for a process this user may not signal."""
        return cls(f"Access denied while force killing process {pid}", pid=pid, timeout=timeout)


__all__ = [
    "InvalidArgumentError",
    "KillEscalationError",
    "KillTimeoutError",
    "LaunchError",
    "MultiplicityError",
    "PidParseError",
    "ProcessControlError",
]
