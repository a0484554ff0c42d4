"""
Centralized logging configuration for programs using unixproc.

This module provides a single setup_logging function that configures
logging consistently with:
- Console output (silenced when PROCESS_CONSOLE_QUIET is set)
- File output to <log directory>/{service_name}.log when a service name is given
- Fresh log file on each start unless PROCESS_LOG_APPEND is set
- User-friendly mode that only shows warnings and errors on the console
"""

import logging
import sys
import threading
from pathlib import Path
from typing import Optional

from .config import ProcessControlSettings, get_settings

# Thread-safe lock for logging configuration
_config_lock = threading.Lock()
_MODULE_LOGGER = logging.getLogger(__name__)
_UNKNOWN_LOGGER_NAME = "<unknown>"

_TECHNICAL_FORMAT = "%(asctime)s.%(msecs)03d - %(name)s - %(levelname)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _should_skip_logging_configuration(root_logger: logging.Logger, service_name: Optional[str]) -> bool:
    if not root_logger.handlers:
        return False

    has_console = any(
        isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler) for handler in root_logger.handlers
    )
    if not service_name:
        has_file = True
    else:
        has_file = any(isinstance(handler, logging.FileHandler) for handler in root_logger.handlers)
    return has_console and has_file


def _close_handlers(logger: logging.Logger, logger_name: Optional[str] = None) -> None:
    """Close all handlers for a logger, logging any errors."""
    for handler in list(logger.handlers):
        try:
            handler.close()
        except OSError as e:  # best-effort cleanup
            safe_name = logger_name if logger_name else _UNKNOWN_LOGGER_NAME
            _MODULE_LOGGER.debug("Handler close failed for logger '%s': %s", safe_name, e)


def _reset_all_handlers(root_logger: logging.Logger) -> None:
    """Close existing handlers on the root logger and every named logger."""
    _close_handlers(root_logger)
    root_logger.handlers = []
    for logger_name in list(logging.Logger.manager.loggerDict.keys()):
        target_logger = logging.getLogger(logger_name)
        _close_handlers(target_logger, logger_name)
        target_logger.handlers = []
        target_logger.propagate = True


def _build_console_handler(user_friendly: bool, console_quiet: bool) -> logging.Handler:
    if user_friendly:
        formatter = logging.Formatter("%(message)s")
    else:
        formatter = logging.Formatter(_TECHNICAL_FORMAT, _DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)

    if console_quiet:
        console_handler.setLevel(logging.CRITICAL + 1)
    elif user_friendly:
        console_handler.setLevel(logging.WARNING)
    else:
        console_handler.setLevel(logging.DEBUG)

    return console_handler


def _resolve_log_directory(settings: ProcessControlSettings, project_root: Path) -> Path:
    if settings.log_directory:
        return Path(settings.log_directory).expanduser()
    return project_root / "logs"


def _configure_file_handler(
    service_name: Optional[str], settings: ProcessControlSettings, project_root: Path
) -> Optional[logging.Handler]:
    if not service_name:
        return None

    logs_dir = _resolve_log_directory(settings, project_root)
    logs_dir.mkdir(parents=True, exist_ok=True)
    log_path = logs_dir / f"{service_name}.log"
    file_mode = "a" if settings.log_append else "w"

    file_handler = logging.FileHandler(log_path, mode=file_mode)
    file_handler.setFormatter(logging.Formatter(_TECHNICAL_FORMAT, _DATE_FORMAT))
    file_handler.setLevel(logging.INFO)
    return file_handler


def setup_logging(service_name: Optional[str] = None, user_friendly: bool = False, *, project_root: Optional[Path] = None):
    """
    Configure root logging once; later calls are no-ops while handlers are in place.

    Service logs go to PROCESS_LOG_DIRECTORY when set, otherwise to ``logs/``
    under ``project_root``, which defaults to the current working directory.
    """

    with _config_lock:
        root_logger = logging.getLogger()

        if _should_skip_logging_configuration(root_logger, service_name):
            return

        settings = get_settings()
        _reset_all_handlers(root_logger)

        root_logger.addHandler(_build_console_handler(user_friendly, settings.console_quiet))

        file_handler = _configure_file_handler(service_name, settings, project_root or Path.cwd())
        if file_handler:
            root_logger.addHandler(file_handler)

        root_logger.setLevel(logging.INFO)


__all__ = ["setup_logging"]
