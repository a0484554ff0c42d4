"""Parse pgrep output lines into pids and (pid, command) pairs."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, List

from ..errors import PidParseError

_PID_PATTERN = re.compile(r"[0-9]+")
_FIRST_WHITESPACE_RUN = re.compile(r"\s+")


@dataclass(frozen=True)
class ProcessMatch:
    """A pid together with the command line pgrep reported for it."""

    pid: int
    command: str


def get_pid_or_throw(token: str) -> int:
    """Parse a pid token made only of ASCII digits.

    Raises:
        PidParseError: If the token is empty or holds anything but digits
    """
    if token is None or not _PID_PATTERN.fullmatch(token):
        raise PidParseError.for_line(token)
    return int(token)


def non_blank_lines(lines: Iterable[str]) -> List[str]:
    return [line for line in lines if line.strip()]


def parse_pid_lines(lines: Iterable[str]) -> List[int]:
    """Parse one bare pid per non-blank line, preserving order."""
    pids = []
    for line in non_blank_lines(lines):
        try:
            pids.append(get_pid_or_throw(line.strip()))
        except PidParseError as exc:
            raise PidParseError.for_line(line) from exc
    return pids


def parse_process_match(line: str) -> ProcessMatch:
    """
    Split a line on its first whitespace run into pid and command.

    The command is everything after that run, kept verbatim.

    Raises:
        PidParseError: If the first token is not a pid
    """
    parts = _FIRST_WHITESPACE_RUN.split(line.lstrip(), maxsplit=1)
    pid_token = parts[0]
    command = parts[1] if len(parts) > 1 else ""
    if not _PID_PATTERN.fullmatch(pid_token):
        raise PidParseError.for_line(line)
    return ProcessMatch(pid=int(pid_token), command=command)


def parse_process_matches(lines: Iterable[str]) -> List[ProcessMatch]:
    """Parse one :class:`ProcessMatch` per non-blank line, preserving order."""
    return [parse_process_match(line) for line in non_blank_lines(lines)]
