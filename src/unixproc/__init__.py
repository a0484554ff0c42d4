"""Launch, find and terminate Unix processes with pgrep and kill."""

from .errors import (
    InvalidArgumentError,
    KillEscalationError,
    KillTimeoutError,
    LaunchError,
    MultiplicityError,
    PidParseError,
    ProcessControlError,
)
from .kill_signal import KillSignal, with_leading_dash
from .pgrep_capability import (
    PgrepCapability,
    get_pgrep_capability,
    get_pgrep_flags,
    was_pgrep_flags_check_successful,
)
from .process_helper import ProcessHelper
from .process_killer import DEFAULT_KILL_TIMEOUT_SECONDS, UNKNOWN_EXIT_CODE, TimeoutAction, kill
from .process_launcher import CommandOutput, forcibly_kill, launch, wait_for_exit
from .process_query import ProcessMatch, find_pids, find_pids_with_command, find_single_pid
from .process_tree import find_child_pids, find_single_child_pid

__all__ = [
    "CommandOutput",
    "DEFAULT_KILL_TIMEOUT_SECONDS",
    "InvalidArgumentError",
    "KillEscalationError",
    "KillSignal",
    "KillTimeoutError",
    "LaunchError",
    "MultiplicityError",
    "PgrepCapability",
    "PidParseError",
    "ProcessControlError",
    "ProcessHelper",
    "ProcessMatch",
    "TimeoutAction",
    "UNKNOWN_EXIT_CODE",
    "find_child_pids",
    "find_pids",
    "find_pids_with_command",
    "find_single_child_pid",
    "find_single_pid",
    "forcibly_kill",
    "get_pgrep_capability",
    "get_pgrep_flags",
    "kill",
    "launch",
    "wait_for_exit",
    "was_pgrep_flags_check_successful",
    "with_leading_dash",
]
