"""
Settings validation system for booklabels.
"""

import logging
from typing import List, TYPE_CHECKING

from .types import ConfigError, ValidationResult

if TYPE_CHECKING:
    from .core import PatcherSettings

logger = logging.getLogger(__name__)


class SettingsValidator:
    """Validates configuration settings."""

    def __init__(self, settings: "PatcherSettings"):
        self.settings = settings

    def validate(self) -> ValidationResult:
        """Validate current configuration."""
        errors: List[str] = []
        warnings: List[str] = []

        # Enum and boolean label options
        try:
            self.settings.labels()
        except ConfigError as e:
            errors.append(str(e))

        # Data folder
        data_folder = self.settings.data_folder
        if data_folder:
            if not data_folder.exists():
                errors.append(f"Data folder does not exist: {data_folder}")
            elif not data_folder.is_dir():
                errors.append(f"Data folder is not a directory: {data_folder}")
        else:
            errors.append("Data folder not set")

        # Load order
        load_order: List[str] = []
        try:
            load_order = self.settings.load_order
            if not load_order:
                warnings.append("Load order is empty, nothing will be patched")
        except ConfigError as e:
            errors.append(str(e))

        if data_folder and data_folder.is_dir():
            for plugin_name in load_order:
                if not (data_folder / plugin_name).is_file():
                    errors.append(f"Plugin in load order not found: {plugin_name}")

        # Re-running on our own output stacks a second label onto every name
        if self.settings.patch_name in load_order:
            warnings.append(
                f"Load order contains the output patch '{self.settings.patch_name}'; "
                "labels already applied by it will be labeled again"
            )

        return ValidationResult(
            is_valid=len(errors) == 0, errors=errors, warnings=warnings
        )
