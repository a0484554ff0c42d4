"""
Launch external processes and observe their exit.

Handles are ``psutil.Popen`` instances: they expose the ``subprocess.Popen``
API (``stdout``, ``stderr``, ``returncode``, ``communicate``) together with
the ``psutil.Process`` API (``kill``, ``wait`` with ``TimeoutExpired``).

Usage:
    from unixproc.process_launcher import launch, wait_for_exit

    handle = launch(["sleep", "5"])
    exit_code = wait_for_exit(handle, timeout=1)  # None, still sleeping
"""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass, field
from os import PathLike
from typing import List, Optional, Sequence, Union

import psutil

from .errors import InvalidArgumentError, LaunchError

logger = logging.getLogger(__name__)

_OUTPUT_ENCODING = "utf-8"


@dataclass(frozen=True)
class CommandOutput:
    """Lines written by a finished helper process."""

    exit_code: Optional[int]
    stdout_lines: List[str] = field(default_factory=list)
    stderr_lines: List[str] = field(default_factory=list)

    @property
    def all_lines(self) -> List[str]:
        """Standard output lines followed by standard error lines."""
        return [*self.stdout_lines, *self.stderr_lines]


def launch(command: Sequence[str], working_directory: Union[str, PathLike, None] = None) -> psutil.Popen:
    """
    Start a process for the given command.

    Standard output and standard error are piped so that callers can read them.

    Args:
        command: Program followed by its arguments
        working_directory: Directory to run the program in; inherits ours when None

    Raises:
        InvalidArgumentError: If the command is empty
        LaunchError: If the operating system cannot create the process
    """
    tokens = [str(token) for token in command]
    if not tokens:
        raise InvalidArgumentError("Command must contain at least the program to run")

    try:
        handle = psutil.Popen(
            tokens,
            cwd=working_directory,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
        )
    except OSError as exc:
        raise LaunchError.for_command(tokens) from exc

    logger.debug("Launched %s with pid %s", tokens, handle.pid)
    return handle


def wait_for_exit(handle: psutil.Popen, timeout: float) -> Optional[int]:
    """Wait up to ``timeout`` seconds and return the exit code, or None if still running.

    The process is left alone when the timeout expires.
    """
    try:
        return handle.wait(timeout=timeout)
    except psutil.TimeoutExpired:
        logger.debug("Process %s still running after %ss", handle.pid, timeout)
        return None


def forcibly_kill(handle: psutil.Popen, timeout: float) -> bool:
    """
    Send SIGKILL straight to the handle and wait up to ``timeout`` seconds.

    Returns:
        True if the process ended before the timeout expired
    """
    try:
        handle.kill()
    except psutil.NoSuchProcess:
        logger.debug("Process %s already gone before SIGKILL", handle.pid)
    return wait_for_exit(handle, timeout) is not None


def close_streams(handle: psutil.Popen) -> None:
    """Close the output pipes of a process whose output will not be read."""
    for stream in (handle.stdout, handle.stderr):
        if stream is not None:
            stream.close()


def collect_output(handle: psutil.Popen) -> CommandOutput:
    """
    Drain standard output and standard error, then return them with the exit code.

    There is no read timeout: a helper that exits while something else keeps
    its pipes open will block the caller.
    """
    stdout, stderr = handle.communicate()
    return CommandOutput(
        exit_code=handle.returncode,
        stdout_lines=_decode_lines(stdout),
        stderr_lines=_decode_lines(stderr),
    )


def run_command(command: Sequence[str]) -> CommandOutput:
    """Launch a helper process and collect everything it prints."""
    return collect_output(launch(command))


def _decode_lines(data: Optional[bytes]) -> List[str]:
    if not data:
        return []
    return data.decode(_OUTPUT_ENCODING, errors="replace").splitlines()


__all__ = [
    "CommandOutput",
    "close_streams",
    "collect_output",
    "forcibly_kill",
    "launch",
    "run_command",
    "wait_for_exit",
]
