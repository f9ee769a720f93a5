"""
Module for working with plugin record data.

Provides services for reading a load order of JSON plugins, indexing
their records, picking winning overrides and writing a patch plugin.
"""

from .service import LoadOrderService
from .models import (
    GameDataObject,
    GameDataCollection,
    TypedObjectsMap,
    PluginObjectsMap,
    BookRecord,
    QuestAlias,
    QuestRecord,
    Skill,
    SkillValue,
    parse_skill,
    BOOK_TYPE,
    QUEST_TYPE,
    METADATA_PLUGIN,
    METADATA_SOURCE_FILE,
)
from .managers import RecordsManager
from .loaders import PluginFileLoader, PluginLoadError
from .patch import PatchPlugin

# Public exports
__all__ = [
    # Main service
    "LoadOrderService",
    "PatchPlugin",
    # Type aliases
    "GameDataObject",
    "GameDataCollection",
    "TypedObjectsMap",
    "PluginObjectsMap",
    # Record views
    "BookRecord",
    "QuestAlias",
    "QuestRecord",
    "Skill",
    "SkillValue",
    "parse_skill",
    # Constants
    "BOOK_TYPE",
    "QUEST_TYPE",
    "METADATA_PLUGIN",
    "METADATA_SOURCE_FILE",
    # Component classes (for advanced usage)
    "RecordsManager",
    "PluginFileLoader",
    "PluginLoadError",
]
