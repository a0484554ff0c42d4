"""Read flat JSON objects of environment-style settings."""

import json
from pathlib import Path
from typing import Any, Dict

from ..errors import ConfigurationError


class JsonConfigLoader:
    """Loads fallback settings from a JSON object mapping names to scalars."""

    @staticmethod
    def load_from_file(path: Path) -> Dict[str, str]:
        """
        Load configuration from a JSON file, normalizing every value to a string.

        Raises:
            ConfigurationError: If the file cannot be read, is not valid JSON,
                                is not an object, or holds nested values
        """
        if not path.exists():
            return {}

        try:
            payload = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise ConfigurationError.invalid_format(str(path), "unparseable JSON", "a JSON object") from exc
        except OSError as exc:
            raise ConfigurationError.load_failed("JSON settings", str(path)) from exc

        if not isinstance(payload, dict):
            raise ConfigurationError.invalid_format(str(path), type(payload).__name__, "a JSON object")

        return JsonConfigLoader._normalize_values(payload, path)

    @staticmethod
    def _normalize_values(payload: Dict[str, Any], path: Path) -> Dict[str, str]:
        normalized: Dict[str, str] = {}
        for key, value in payload.items():
            if isinstance(value, (dict, list)):
                raise ConfigurationError.invalid_value(f"{key} in {path}", value, "Settings must be scalar values")
            if value is None:
                normalized[str(key)] = ""
            elif isinstance(value, bool):
                normalized[str(key)] = "true" if value else "false"
            else:
                normalized[str(key)] = str(value)
        return normalized
