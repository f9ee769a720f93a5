"""
File loaders for plugin record data.

Reads plugin JSON files with orjson and groups their records by type.
"""

import logging
from pathlib import Path
from collections import defaultdict
from typing import List

import orjson

from .models import (
    GameDataObject,
    TypedObjectsMap,
    METADATA_PLUGIN,
    METADATA_SOURCE_FILE,
)


class PluginLoadError(Exception):
    """Raised when a plugin file cannot be read or parsed."""
    pass


class PluginFileLoader:
    """Loads and parses plugin JSON files."""

    def __init__(self):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.logger.debug("PluginFileLoader initialized")

    @staticmethod
    def read_and_group_plugin(plugin_file: Path, plugin_name: str) -> TypedObjectsMap:
        """Read a plugin file and group its records by their 'type'.

        Returns a dict mapping type_name -> list of records, in file order.
        Records without a 'type' field are placed under the 'unknown' key.
        Each record is annotated with `_plugin` and `_source_file` to track
        its origin.

        Args:
            plugin_file: Path to the plugin JSON file
            plugin_name: Name of the plugin in the load order

        Returns:
            Dictionary mapping record types to lists of records

        Raises:
            PluginLoadError: If the file is unreadable or not valid JSON
        """
        grouped: TypedObjectsMap = defaultdict(list)

        try:
            with plugin_file.open("rb") as f:  # orjson works with bytes
                data = orjson.loads(f.read())
        except (OSError, orjson.JSONDecodeError) as e:
            raise PluginLoadError(f"Error reading plugin file {plugin_file}: {e}") from e

        records: List[GameDataObject] = data if isinstance(data, list) else [data]  # type: ignore

        for record in records:
            if not isinstance(record, dict):
                continue

            record_type = record.get("type") or "unknown"

            # Copy to avoid mutating structures returned by the parser
            record = record.copy()
            record[METADATA_PLUGIN] = plugin_name
            record[METADATA_SOURCE_FILE] = str(plugin_file)

            grouped[str(record_type)].append(record)

        return grouped
