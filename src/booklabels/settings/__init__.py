"""
Settings package for booklabels.

This package provides a modular, type-safe configuration layer over a
JSON settings document.

Usage:
    from booklabels.settings import PatcherSettings

    settings = PatcherSettings.from_file("settings.json")
    result = settings.validate()
    labels = settings.labels()
"""

from .core import PatcherSettings
from .store import SettingsStore
from .types import (
    ConfigError,
    ValidationResult,
    LabelFormat,
    LabelPosition,
    EncapsulatingCharacters,
    LabelSettings,
)

__all__ = [
    "PatcherSettings",
    "SettingsStore",
    "ConfigError",
    "ValidationResult",
    "LabelFormat",
    "LabelPosition",
    "EncapsulatingCharacters",
    "LabelSettings",
]
