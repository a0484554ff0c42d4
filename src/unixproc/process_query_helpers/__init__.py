"""Command building and output parsing for pgrep queries."""

from .command_builder import PGREP_COMMAND, build_child_pgrep_command, build_pgrep_command, validate_pgrep_pattern
from .output_parser import (
    ProcessMatch,
    get_pid_or_throw,
    non_blank_lines,
    parse_pid_lines,
    parse_process_match,
    parse_process_matches,
)

__all__ = [
    "PGREP_COMMAND",
    "ProcessMatch",
    "build_child_pgrep_command",
    "build_pgrep_command",
    "get_pid_or_throw",
    "non_blank_lines",
    "parse_pid_lines",
    "parse_process_match",
    "parse_process_matches",
    "validate_pgrep_pattern",
]
