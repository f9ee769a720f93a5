"""
Logging-related settings for booklabels.
"""

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .store import SettingsStore

logger = logging.getLogger(__name__)

DEFAULT_LOG_FILE_PATH = "logs/booklabels.csv"
VALID_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoggingSettings:
    """Manages logging-related settings."""

    def __init__(self, settings: "SettingsStore"):
        self.settings = settings

    def _get_str(self, key: str, default: str = "") -> str:
        """Type-safe string retrieval from settings."""
        value = self.settings.value(key, default)
        return str(value) if value is not None else default

    def _get_bool(self, key: str, default: bool = False) -> bool:
        """Type-safe boolean retrieval from settings."""
        value = self.settings.value(key, default)
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return value.lower() in ("true", "1", "yes")
        return bool(value) if value is not None else default

    # === CONSOLE LOGGING SETTINGS ===

    @property
    def console_logging(self) -> bool:
        """Check if console logging is enabled."""
        return self._get_bool("logging/consoleEnabled", True)

    @property
    def console_log_level(self) -> str:
        """Get console logging level."""
        value = self._get_str("logging/consoleLevel", "INFO").upper()
        if value not in VALID_LEVELS:
            logger.warning(f"Invalid console log level: {value}, using INFO")
            return "INFO"
        return value

    @console_log_level.setter
    def console_log_level(self, value: str) -> None:
        if value.upper() in VALID_LEVELS:
            self.settings.set_value("logging/consoleLevel", value.upper())
        else:
            logger.warning(
                f"Invalid console log level: {value}, keeping current: {self.console_log_level}"
            )

    @property
    def console_use_colors(self) -> bool:
        """Check if console should use colors."""
        return self._get_bool("logging/consoleUseColors", True)

    # === FILE LOGGING SETTINGS ===

    @property
    def file_logging(self) -> bool:
        """Check if file logging is enabled."""
        return self._get_bool("logging/fileEnabled", False)

    @property
    def log_file_path(self) -> str:
        """Get log file path."""
        return self._get_str("logging/filePath", DEFAULT_LOG_FILE_PATH) or DEFAULT_LOG_FILE_PATH
