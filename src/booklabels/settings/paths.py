"""
Path-related settings for booklabels.
"""

from pathlib import Path
from typing import List, Optional, TYPE_CHECKING, cast

from .types import ConfigError

if TYPE_CHECKING:
    from .store import SettingsStore

DEFAULT_PATCH_NAME = "BookLabels.json"


class PathSettings:
    """Manages the data folder, load order and output patch name."""

    def __init__(self, settings: "SettingsStore"):
        self.settings = settings

    def _get_str(self, key: str, default: str = "") -> str:
        """Type-safe string retrieval from settings."""
        value = self.settings.value(key, default)
        return str(value) if value is not None else default

    def _get_list(self, key: str, default: Optional[List[str]] = None) -> List[str]:
        """Type-safe list-of-strings retrieval from settings.

        Raises:
            ConfigError: If the value is not a list of strings
        """
        if default is None:
            default = []
        value = self.settings.value(key, default)
        if value is None:
            return default
        if not isinstance(value, list):
            raise ConfigError(f"Option '{key}' must be a list, got {value!r}")
        items = cast(list[object], value)
        for item in items:
            if not isinstance(item, str):
                raise ConfigError(f"Option '{key}' must only hold names, got {item!r}")
        return cast(List[str], list(items))

    @property
    def data_folder(self) -> Optional[Path]:
        """Get the folder holding plugin files."""
        path_str = self._get_str("dataFolder", "")
        return Path(path_str) if path_str else None

    @data_folder.setter
    def data_folder(self, value: Optional[Path]) -> None:
        self.settings.set_value("dataFolder", str(value) if value else "")

    @property
    def load_order(self) -> List[str]:
        """Get enabled plugin file names, lowest priority first."""
        return self._get_list("loadOrder", [])

    @load_order.setter
    def load_order(self, value: List[str]) -> None:
        self.settings.set_value("loadOrder", list(value))

    @property
    def patch_name(self) -> str:
        """Get the file name of the patch plugin to write."""
        return self._get_str("patchName", DEFAULT_PATCH_NAME) or DEFAULT_PATCH_NAME

    @patch_name.setter
    def patch_name(self, value: str) -> None:
        self.settings.set_value("patchName", value)

    @property
    def patch_path(self) -> Optional[Path]:
        """Get the full patch path (derived from data_folder)."""
        if self.data_folder:
            return self.data_folder / self.patch_name
        return None
