"""
Detect which pgrep flags print a pid together with the full command line.

procps pgrep needs ``-fa`` for that, while BSD and older procps releases use
``-fl``. The answer is found once per Python process by launching a
disposable ``sleep 123`` and asking pgrep about it with each candidate in
turn. Detection never raises: when no candidate works, ``-fa`` is used and
the failure is logged so that callers can decide whether to trust
pgrep-based lookups.

Usage:
    from unixproc.pgrep_capability import get_pgrep_flags, was_pgrep_flags_check_successful

    flags = get_pgrep_flags()  # "-fa" or "-fl"
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

import psutil

from .config import ConfigurationError, get_settings
from .config.settings import DEFAULT_PROBE_CLEANUP_TIMEOUT_SECONDS
from .errors import LaunchError
from .process_launcher import close_streams, launch, run_command
from .process_query_helpers import PGREP_COMMAND, non_blank_lines

logger = logging.getLogger(__name__)

PGREP_FLAG_CANDIDATES: tuple[str, ...] = ("-fa", "-fl")
DEFAULT_PGREP_FLAGS = "-fa"

# Unusual duration so the probe's command line is easy to recognise
PROBE_SLEEP_SECONDS = "123"
PROBE_COMMAND = ("sleep", PROBE_SLEEP_SECONDS)
PROBE_COMMAND_TEXT = " ".join(PROBE_COMMAND)
PROBE_PATTERN = "sleep"


@dataclass(frozen=True)
class PgrepCapability:
    """The pgrep flags in use and whether they were verified on this host."""

    flags: str
    detection_succeeded: bool


def choose_pgrep_flags(flags: Optional[str]) -> PgrepCapability:
    """Adopt detected flags, or fall back to the default when detection found none."""
    if flags is None:
        return PgrepCapability(flags=DEFAULT_PGREP_FLAGS, detection_succeeded=False)
    return PgrepCapability(flags=flags, detection_succeeded=True)


def line_reports_probe(line: str, probe_pid: int) -> bool:
    """True if the line names the probe pid as its own token and shows the probe command."""
    return str(probe_pid) in line.split() and PROBE_COMMAND_TEXT in line


def flags_report_command(flags: str, probe_pid: int) -> bool:
    """Run ``pgrep <flags> sleep`` and look for the probe in stdout and stderr."""
    output = run_command([PGREP_COMMAND, flags, PROBE_PATTERN])
    lines = non_blank_lines(output.all_lines)
    logger.debug("pgrep %s reported %d line(s) while probing for pid %s", flags, len(lines), probe_pid)
    return any(line_reports_probe(line, probe_pid) for line in lines)


def detect_pgrep_flags(candidates: Sequence[str] = PGREP_FLAG_CANDIDATES) -> Optional[str]:
    """
    Return the first candidate whose output shows pid and full command, or None.

    A failure to launch the probe or pgrep itself counts as no candidate found.
    """
    try:
        probe = launch(PROBE_COMMAND)
    except LaunchError as exc:
        logger.warning("Could not launch pgrep probe process %s: %s", PROBE_COMMAND_TEXT, exc)
        return None

    try:
        for flags in candidates:
            if flags_report_command(flags, probe.pid):
                return flags
        return None
    except LaunchError as exc:
        logger.warning("Could not run %s while detecting flags: %s", PGREP_COMMAND, exc)
        return None
    finally:
        terminate_probe_quietly(probe)


def terminate_probe_quietly(probe: psutil.Popen) -> None:
    """
    Kill the probe and reap it.

    Best effort by contract: failures are logged and discarded so that they
    never hide the detection result.
    """
    try:
        probe.kill()
        probe.wait(timeout=_probe_cleanup_timeout())
    except psutil.NoSuchProcess:
        logger.debug("pgrep probe process %s already gone", probe.pid)
    except (psutil.Error, OSError) as exc:  # best-effort cleanup
        logger.warning("Unable to terminate pgrep probe process %s: %s", probe.pid, exc)
    finally:
        close_streams(probe)


def _probe_cleanup_timeout() -> float:
    try:
        return get_settings().probe_cleanup_timeout_seconds
    except ConfigurationError as exc:
        logger.warning("Invalid probe cleanup timeout setting; using %ss: %s", DEFAULT_PROBE_CLEANUP_TIMEOUT_SECONDS, exc)
        return DEFAULT_PROBE_CLEANUP_TIMEOUT_SECONDS


def log_pgrep_check_info(capability: PgrepCapability) -> None:
    if capability.detection_succeeded:
        logger.info("pgrep flags check succeeded; using %s to list pids with full command lines", capability.flags)
    else:
        logger.warning(
            "pgrep flags check failed; falling back to %s. Lookups that list pids with "
            "their command lines may return incomplete or unexpected results",
            capability.flags,
        )


def compute_pgrep_capability() -> PgrepCapability:
    capability = choose_pgrep_flags(detect_pgrep_flags())
    log_pgrep_check_info(capability)
    return capability


class PgrepCapabilityCache:
    """Compute-once holder for the detected pgrep capability.

    Concurrent first callers are serialized so that detection runs exactly
    once and every caller observes the same value.
    """

    def __init__(self, compute: Callable[[], PgrepCapability] = compute_pgrep_capability) -> None:
        self._compute = compute
        self._lock = threading.Lock()
        self._value: Optional[PgrepCapability] = None

    def get(self) -> PgrepCapability:
        value = self._value
        if value is not None:
            return value
        with self._lock:
            if self._value is None:
                self._value = self._compute()
            return self._value

    def is_computed(self) -> bool:
        return self._value is not None

    def reset(self) -> None:
        """Forget the cached value. Intended for tests."""
        with self._lock:
            self._value = None


_CAPABILITY_CACHE = PgrepCapabilityCache()


def get_pgrep_capability() -> PgrepCapability:
    """Return the process-wide capability, detecting it on first use."""
    return _CAPABILITY_CACHE.get()


def get_pgrep_flags() -> str:
    """Return the pgrep flags used to list pids with their full command lines."""
    return get_pgrep_capability().flags


def was_pgrep_flags_check_successful() -> bool:
    """Return whether the flags in use were verified on this host."""
    return get_pgrep_capability().detection_succeeded


def log_pgrep_flag_warnings() -> None:
    """Warn when the flags in use were not verified."""
    capability = get_pgrep_capability()
    if not capability.detection_succeeded:
        logger.warning(
            "pgrep flags %s were not verified on this host; features depending on "
            "pgrep command-line output may not work as expected",
            capability.flags,
        )


__all__ = [
    "DEFAULT_PGREP_FLAGS",
    "PGREP_FLAG_CANDIDATES",
    "PROBE_COMMAND",
    "PgrepCapability",
    "PgrepCapabilityCache",
    "choose_pgrep_flags",
    "compute_pgrep_capability",
    "detect_pgrep_flags",
    "flags_report_command",
    "get_pgrep_capability",
    "get_pgrep_flags",
    "line_reports_probe",
    "log_pgrep_check_info",
    "log_pgrep_flag_warnings",
    "terminate_probe_quietly",
    "was_pgrep_flags_check_successful",
]
