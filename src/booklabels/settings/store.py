"""
Key/value storage backing the settings subsystems.

Keys use "/" to address nested objects of the JSON settings document,
e.g. "logging/consoleLevel" reads data["logging"]["consoleLevel"].
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional, cast

import orjson

from .types import ConfigError

logger = logging.getLogger(__name__)


class SettingsStore:
    """In-memory settings document with path-style key access."""

    def __init__(self, data: Optional[Dict[str, Any]] = None, file_name: str = ""):
        self._data: Dict[str, Any] = data if data is not None else {}
        self._file_name = file_name

    @classmethod
    def from_file(cls, path: Path) -> "SettingsStore":
        """Load a settings document from a JSON file.

        Raises:
            ConfigError: If the file cannot be read or is not a JSON object
        """
        try:
            data = orjson.loads(path.read_bytes())
        except OSError as e:
            raise ConfigError(f"Cannot read settings file {path}: {e}") from e
        except orjson.JSONDecodeError as e:
            raise ConfigError(f"Settings file {path} is not valid JSON: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Settings file {path} must contain a JSON object")

        logger.debug(f"Loaded settings from {path}")
        return cls(cast(Dict[str, Any], data), file_name=str(path))

    def file_name(self) -> str:
        """Return the file this store was loaded from ("" when in-memory)."""
        return self._file_name

    def contains(self, key: str) -> bool:
        """Check whether a key is present."""
        sentinel = object()
        return self.value(key, sentinel) is not sentinel

    def value(self, key: str, default: Any = None) -> Any:
        """Return the value stored under key, or default if absent."""
        node: Any = self._data
        for part in key.split("/"):
            if not isinstance(node, dict) or part not in node:
                return default
            node = cast(Dict[str, Any], node)[part]
        return node

    def set_value(self, key: str, value: Any) -> None:
        """Store value under key, creating nested objects as needed."""
        parts = key.split("/")
        node = self._data
        for part in parts[:-1]:
            child = node.get(part)
            if not isinstance(child, dict):
                child = {}
                node[part] = child
            node = cast(Dict[str, Any], child)
        node[parts[-1]] = value
