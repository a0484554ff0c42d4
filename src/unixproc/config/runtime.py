from __future__ import annotations

"""Runtime helpers for reading environment-backed settings."""


import os
from pathlib import Path
from typing import Callable, Optional, TypeVar

from .errors import ConfigurationError

T = TypeVar("T")

_TRUE_VALUES = frozenset({"1", "true", "t", "yes", "y", "on"})
_FALSE_VALUES = frozenset({"0", "false", "f", "no", "n", "off"})

_DOTENV_CANDIDATES = (Path(".env"), Path.home() / ".env")
_JSON_ENV_CANDIDATES = (Path("config/runtime_env.json"),)

_DEFAULT_VALUES: dict[str, str] | None = None


def _load_default_values() -> dict[str, str]:
    """Collect fallback values from .env-style files, then JSON files; the first file to declare a name wins."""
    from .runtime_helpers import DotenvLoader, JsonConfigLoader

    global _DEFAULT_VALUES
    if _DEFAULT_VALUES is not None:
        return _DEFAULT_VALUES

    defaults: dict[str, str] = {}
    sources = [DotenvLoader.load_from_file(path) for path in _DOTENV_CANDIDATES]
    sources.extend(JsonConfigLoader.load_from_file(path) for path in _JSON_ENV_CANDIDATES)
    for source in sources:
        for key, value in source.items():
            defaults.setdefault(key, value)

    _DEFAULT_VALUES = defaults
    return defaults


def reset_default_values() -> None:
    """Forget cached file defaults so they are re-read on next access."""
    global _DEFAULT_VALUES
    _DEFAULT_VALUES = None


def _lookup(name: str, *, strip: bool, allow_blank: bool) -> str | None:
    for candidate in (os.getenv(name), _load_default_values().get(name)):
        if candidate is None:
            continue
        value = candidate.strip() if strip else candidate
        if value or allow_blank:
            return value
    return None


def env_str(
    name: str,
    or_value: str | None = None,
    *,
    required: bool = False,
    strip: bool = True,
    allow_blank: bool = False,
) -> str | None:
    """Fetch a setting as a string, falling back to file defaults when the variable is unset or blank."""

    value = _lookup(name, strip=strip, allow_blank=allow_blank)
    if value is not None:
        return value
    if required:
        raise ConfigurationError.missing_value(name, "required environment variable is not set")
    return or_value


def _env_typed(
    name: str,
    or_value: Optional[T],
    required: bool,
    cast: Callable[[str], T],
    expected: str,
) -> Optional[T]:
    raw = env_str(name)
    if raw is None:
        if required and or_value is None:
            raise ConfigurationError.missing_value(name, "required environment variable is not set")
        return or_value
    try:
        return cast(raw)
    except ValueError as exc:
        raise ConfigurationError.invalid_value(name, raw, f"Expected {expected}") from exc


def _parse_bool(raw: str) -> bool:
    lowered = raw.lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(raw)


def env_int(name: str, or_value: int | None = None, *, required: bool = False) -> int | None:
    """Fetch an environment variable and coerce it to ``int``."""
    return _env_typed(name, or_value, required, int, "an integer")


def env_float(name: str, or_value: float | None = None, *, required: bool = False) -> float | None:
    return _env_typed(name, or_value, required, float, "a number")


def env_bool(name: str, or_value: bool | None = None, *, required: bool = False) -> bool | None:
    """Fetch an environment variable and coerce it to ``bool``."""
    allowed = ", ".join(sorted(_TRUE_VALUES | _FALSE_VALUES))
    return _env_typed(name, or_value, required, _parse_bool, f"one of {allowed}")


def env_seconds(name: str, or_value: float | None = None, *, required: bool = False) -> float | None:
    """Fetch a non-negative duration in seconds."""

    value = env_float(name, or_value=or_value, required=required)
    if value is not None and value < 0:
        raise ConfigurationError.invalid_value(name, value, "Durations must be non-negative")
    return value


__all__ = [
    "ConfigurationError",
    "env_bool",
    "env_float",
    "env_int",
    "env_seconds",
    "env_str",
    "reset_default_values",
]
