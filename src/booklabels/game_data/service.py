"""
Main service for working with plugin record data.

Provides high-level API for loading a load order of plugins, enumerating
winning records and resolving form id references.
"""

import logging
from pathlib import Path
from concurrent.futures import ThreadPoolExecutor
from typing import Iterator, List, Optional, TYPE_CHECKING

from .loaders import PluginFileLoader, PluginLoadError
from .managers import RecordsManager
from .models import QUEST_TYPE, GameDataObject, QuestRecord

if TYPE_CHECKING:
    from ..settings import PatcherSettings


class LoadOrderService:
    """Service for working with the records of a plugin load order.

    Reads every enabled plugin from the data folder, tracks which plugin
    provided each record, and answers "which version wins" questions:
    a plugin later in the load order overrides records with the same form
    id from plugins before it. Plugins present in the data folder but not
    in the load order are never read.
    """

    def __init__(self, data_folder: str | Path, load_order: List[str]):
        """Initialize and load the plugins.

        Args:
            data_folder: Folder containing the plugin files
            load_order: Enabled plugin file names, lowest priority first

        Raises:
            PluginLoadError: If any plugin in the load order cannot be read
        """
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.data_folder = Path(data_folder)
        self.load_order = list(load_order)

        self.loader = PluginFileLoader()
        self.manager = RecordsManager()

        self.logger.info(f"Initializing LoadOrderService with data folder: {data_folder}")
        self._load_data()

    @classmethod
    def from_settings(cls, settings: "PatcherSettings") -> "LoadOrderService":
        """Create a service for the data folder and load order in settings."""
        data_folder = settings.data_folder
        if data_folder is None:
            raise PluginLoadError("Data folder not set")
        return cls(data_folder, settings.load_order)

    def _load_data(self) -> None:
        """Read all enabled plugins and index them in load order."""
        self.logger.info(f"Loading {len(self.load_order)} plugins...")

        paths = [self.data_folder / name for name in self.load_order]

        # Files are parsed in parallel, but added in load order
        with ThreadPoolExecutor(max_workers=8) as executor:
            results = executor.map(
                self.loader.read_and_group_plugin, paths, self.load_order
            )
            try:
                for plugin_name, grouped in zip(self.load_order, results):
                    self.manager.add_records(grouped, plugin_name)
                    self.logger.debug(
                        f"Loaded plugin '{plugin_name}': "
                        f"{sum(len(records) for records in grouped.values())} records"
                    )
            except PluginLoadError as e:
                self.logger.error(str(e))
                raise

        self.logger.info(
            f"Plugin loading completed. Found {self.manager.count_types()} record types "
            f"across {len(self.manager.available_plugins)} plugins"
        )

    # Public API methods - delegate to manager

    def priority_order(self) -> List[str]:
        """Return enabled plugins, highest priority first."""
        return list(reversed(self.load_order))

    def get_winning_record(self, form_id: str) -> Optional[GameDataObject]:
        """Return the winning version of a record, or None if unknown."""
        return self.manager.get_record_by_id(form_id, self.priority_order())

    def resolve(self, form_id: str, expected_type: str) -> Optional[GameDataObject]:
        """Resolve a form id reference to a record of the expected type.

        Args:
            form_id: Referenced form id
            expected_type: Record type the caller wants, e.g. "BOOK"

        Returns:
            The winning record, or None when the reference does not resolve
            or points at a record of another type
        """
        record = self.get_winning_record(form_id)
        if record is None or record.get("type") != expected_type:
            return None
        return record

    def iter_winning_records(self, record_type: str) -> Iterator[GameDataObject]:
        """Yield the winning version of every record of a type."""
        return self.manager.iter_winning_records(record_type, self.priority_order())

    def winning_quests(self) -> Iterator[QuestRecord]:
        """Yield every winning quest."""
        for record in self.iter_winning_records(QUEST_TYPE):
            yield QuestRecord.from_dict(record)
