"""
booklabels: skill, map marker and quest labels for book names.

Reads a load order of JSON plugins, works out which books teach a skill,
carry a map marker or belong to a quest, and writes a patch plugin that
renames those books to show it.
"""

__version__ = "0.1.0"
__author__ = "booklabels Contributors"

from .game_data import LoadOrderService, PatchPlugin
from .labeling import BookPatcher, LabelChange, classify, format_label
from .settings import PatcherSettings, LabelSettings, ConfigError
from .utils.logging_config import setup_logging

__all__ = [
    # Services
    "LoadOrderService",
    "PatchPlugin",
    "BookPatcher",
    "LabelChange",
    # Core functions
    "classify",
    "format_label",
    # Settings
    "PatcherSettings",
    "LabelSettings",
    "ConfigError",
    # Logging
    "setup_logging",
]
