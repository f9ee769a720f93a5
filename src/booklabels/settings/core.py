"""
Core settings management for booklabels.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from .types import LabelSettings, ValidationResult
from .store import SettingsStore
from .validation import SettingsValidator
from .paths import PathSettings
from .labels import LabelOptions
from .logging import LoggingSettings

logger = logging.getLogger(__name__)


class PatcherSettings:
    """
    Configuration for one patcher run, read from a JSON settings document.

    Provides type-safe access to the label options, the plugin paths and
    the logging options through separate subsystems.
    """

    def __init__(self, store: Optional[SettingsStore] = None):
        """Initialize settings over a store.

        Args:
            store: Backing store; an empty one gives all defaults
        """
        self.settings = store if store is not None else SettingsStore()

        # Initialize subsystems
        self._validator = SettingsValidator(self)
        self._paths = PathSettings(self.settings)
        self._labels = LabelOptions(self.settings)
        self._logging = LoggingSettings(self.settings)

        logger.debug(
            f"Settings initialized from: {self.settings.file_name() or '<defaults>'}"
        )

    @classmethod
    def from_file(cls, path: str | Path) -> "PatcherSettings":
        """Load settings from a JSON file.

        Raises:
            ConfigError: If the file cannot be read or parsed
        """
        return cls(SettingsStore.from_file(Path(path)))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PatcherSettings":
        """Build settings from an already parsed document."""
        return cls(SettingsStore(dict(data)))

    # === SUBSYSTEM ACCESS ===

    @property
    def logging(self) -> LoggingSettings:
        """Access logging settings subsystem."""
        return self._logging

    def labels(self) -> LabelSettings:
        """Return the immutable label settings for a run.

        Raises:
            ConfigError: If a label option is not recognized
        """
        return self._labels.freeze()

    # === PATH SETTINGS (DELEGATED) ===

    @property
    def data_folder(self) -> Optional[Path]:
        """Get the folder holding plugin files."""
        return self._paths.data_folder

    @data_folder.setter
    def data_folder(self, value: Optional[Path]) -> None:
        self._paths.data_folder = value

    @property
    def load_order(self) -> List[str]:
        """Get enabled plugins, lowest priority first."""
        return self._paths.load_order

    @load_order.setter
    def load_order(self, value: List[str]) -> None:
        self._paths.load_order = value

    @property
    def patch_name(self) -> str:
        """Get the output patch file name."""
        return self._paths.patch_name

    @patch_name.setter
    def patch_name(self, value: str) -> None:
        self._paths.patch_name = value

    @property
    def patch_path(self) -> Optional[Path]:
        """Get the full output patch path."""
        return self._paths.patch_path

    # === LOGGING SETTINGS (DELEGATED) ===

    @property
    def console_logging(self) -> bool:
        """Check if console logging is enabled."""
        return self._logging.console_logging

    @property
    def console_log_level(self) -> str:
        """Get console logging level."""
        return self._logging.console_log_level

    @property
    def console_use_colors(self) -> bool:
        """Check if console should use colors."""
        return self._logging.console_use_colors

    @property
    def file_logging(self) -> bool:
        """Check if file logging is enabled."""
        return self._logging.file_logging

    @property
    def log_file_path(self) -> str:
        """Get log file path."""
        return self._logging.log_file_path

    # === VALIDATION ===

    def validate(self) -> ValidationResult:
        """Validate current configuration."""
        return self._validator.validate()

    def get_settings_file_path(self) -> str:
        """Get the file path settings were loaded from."""
        return self.settings.file_name()
