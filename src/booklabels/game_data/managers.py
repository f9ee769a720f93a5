"""
Managers for record indexing and retrieval.

Provides RecordsManager class that handles storage, indexing by plugin,
and lookup of winning records across the load order.
"""

import logging
from collections import defaultdict
from typing import Dict, Iterator, List, Optional, Set

from .models import GameDataObject, GameDataCollection, TypedObjectsMap, PluginObjectsMap


class RecordsManager:
    """Manager for indexing and retrieving plugin records.

    Maintains two indices:
    - records_by_plugin: plugin-scoped index mapping plugin -> type -> records
    - records_by_id: (plugin, form_id) -> record, for O(1) lookups
    """

    def __init__(self):
        # Plugin-scoped index: plugin -> (type_name -> list of records)
        self.records_by_plugin: PluginObjectsMap = defaultdict(lambda: defaultdict(list))

        # Fast lookup index: (plugin, form_id) -> record
        self.records_by_id: Dict[tuple[str, str], GameDataObject] = {}

        # Plugins in the order they were added
        self.available_plugins: List[str] = []
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.logger.debug("RecordsManager initialized")

    def add_records(self, grouped_records: TypedObjectsMap, plugin: str) -> None:
        """Add a batch of grouped records from a specific plugin.

        Args:
            grouped_records: Dictionary mapping record types to lists of records
            plugin: Name of the plugin providing these records
        """
        if plugin not in self.available_plugins:
            self.available_plugins.append(plugin)

        for record_type, records in grouped_records.items():
            if not records:
                continue
            self.records_by_plugin[plugin][record_type].extend(records)

            for record in records:
                form_id = record.get("id")
                if isinstance(form_id, str) and form_id:
                    # Later definitions inside one plugin replace earlier ones
                    self.records_by_id[(plugin, form_id)] = record

    def count_types(self) -> int:
        """Return the number of distinct record types across all plugins."""
        return len({
            record_type
            for typed in self.records_by_plugin.values()
            for record_type in typed
        })

    def get_records_by_type_from_plugin(
        self, record_type: str, plugin: str
    ) -> GameDataCollection:
        """Return records of the specified type from a particular plugin."""
        return self.records_by_plugin.get(plugin, {}).get(record_type, [])

    def get_record_by_id(
        self, form_id: str, priority_order: Optional[List[str]] = None
    ) -> Optional[GameDataObject]:
        """Return the winning record for a form id.

        Args:
            form_id: ID of the record to find
            priority_order: Plugins, highest priority first. If None, the
                reverse of the order plugins were added in.

        Returns:
            The highest-priority matching record or None if not found
        """
        if priority_order is None:
            priority_order = list(reversed(self.available_plugins))

        for plugin in priority_order:
            record = self.records_by_id.get((plugin, form_id))
            if record is not None:
                return record

        return None

    def iter_winning_records(
        self, record_type: str, priority_order: Optional[List[str]] = None
    ) -> Iterator[GameDataObject]:
        """Yield the winning version of every record of a type.

        Plugins are walked highest priority first and records in file order;
        each form id is yielded once, from the first plugin that has it.
        A record whose winning version changed type is not yielded.

        Args:
            record_type: Type of records to yield
            priority_order: Plugins, highest priority first
        """
        if priority_order is None:
            priority_order = list(reversed(self.available_plugins))

        seen: Set[str] = set()
        for plugin in priority_order:
            for record in self.get_records_by_type_from_plugin(record_type, plugin):
                form_id = record.get("id")
                if not isinstance(form_id, str) or not form_id or form_id in seen:
                    continue
                seen.add(form_id)
                winner = self.get_record_by_id(form_id, priority_order)
                if winner is not None and winner.get("type") == record_type:
                    yield winner
