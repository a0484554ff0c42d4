"""
Settings for process control, resolved from the environment.

Values come from environment variables first, then from ``.env`` files and
``config/runtime_env.json``. Kill timeouts are intentionally absent: callers
pass them per call.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import partial
from typing import Optional

from .runtime import env_bool, env_seconds, env_str

DEFAULT_PROBE_CLEANUP_TIMEOUT_SECONDS = 1.0


@dataclass(frozen=True)
class ProcessControlSettings:
    """
    Process control settings.

    Attributes:
        probe_cleanup_timeout_seconds: Time allowed for reaping the pgrep probe process after killing it
        console_quiet: Silence console logging (file logging is unaffected)
        log_append: Append to an existing service log file instead of truncating it
        log_directory: Directory for service log files; defaults to ``logs/`` under the current working directory
    """

    probe_cleanup_timeout_seconds: float = field(
        default_factory=partial(
            env_seconds,
            "PROCESS_PROBE_CLEANUP_TIMEOUT_SECONDS",
            DEFAULT_PROBE_CLEANUP_TIMEOUT_SECONDS,
        )
    )
    console_quiet: bool = field(default_factory=partial(env_bool, "PROCESS_CONSOLE_QUIET", False))
    log_append: bool = field(default_factory=partial(env_bool, "PROCESS_LOG_APPEND", False))
    log_directory: Optional[str] = field(default_factory=partial(env_str, "PROCESS_LOG_DIRECTORY"))


# Lazy load so importing the package never requires a readable environment
_settings: ProcessControlSettings | None = None


def get_settings() -> ProcessControlSettings:
    """Get or initialize the shared settings."""
    global _settings
    if _settings is None:
        _settings = ProcessControlSettings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next access re-reads the environment."""
    global _settings
    _settings = None


__all__ = [
    "DEFAULT_PROBE_CLEANUP_TIMEOUT_SECONDS",
    "ProcessControlSettings",
    "get_settings",
    "reset_settings",
]
