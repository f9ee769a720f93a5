"""
Data models for plugin record data.

Records are kept as dicts in the store, the way they come out of the
plugin files. Typed, read-only views (BookRecord, QuestRecord) are built
from them for labeling.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Dict, List, Optional, Tuple, TypeAlias, Union, cast

# Type aliases for clarity
GameDataObject: TypeAlias = Dict[str, Any]
"""A single plugin record (book, quest, ...) as a dict."""

GameDataCollection: TypeAlias = List[GameDataObject]
"""A collection of plugin records."""

TypedObjectsMap: TypeAlias = Dict[str, GameDataCollection]
"""Maps record type (e.g., 'BOOK', 'QUEST') to list of records."""

PluginObjectsMap: TypeAlias = Dict[str, TypedObjectsMap]
"""Maps plugin name to its typed records map."""


# Metadata keys added to records during loading
METADATA_PLUGIN = "_plugin"
METADATA_SOURCE_FILE = "_source_file"
METADATA_KEYS = (METADATA_PLUGIN, METADATA_SOURCE_FILE)

# Record types
BOOK_TYPE = "BOOK"
QUEST_TYPE = "QUEST"


class Skill(IntEnum):
    """Skills a book can teach. NONE marks a skill slot left empty."""
    NONE = -1
    OneHanded = 6
    TwoHanded = 7
    Archery = 8
    Block = 9
    Smithing = 10
    HeavyArmor = 11
    LightArmor = 12
    Pickpocket = 13
    Lockpicking = 14
    Sneak = 15
    Alchemy = 16
    Speech = 17
    Alteration = 18
    Conjuration = 19
    Destruction = 20
    Illusion = 21
    Restoration = 22
    Enchanting = 23


SkillValue: TypeAlias = Union[Skill, int]
"""A known Skill, or a raw integer the Skill enum doesn't cover."""


def parse_skill(value: Any) -> Optional[SkillValue]:
    """Convert a raw 'skill' field into a Skill.

    Accepts member names ("HeavyArmor", "Heavy Armor") and integers.
    Integers outside the enum are returned unchanged so they can still be
    labeled by their raw value. Unparseable values give None.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        try:
            return Skill(value)
        except ValueError:
            return value
    if isinstance(value, str):
        wanted = value.replace(" ", "").replace("-", "").replace("_", "").lower()
        for skill in Skill:
            if skill.name.lower() == wanted:
                return skill
        try:
            return parse_skill(int(value))
        except ValueError:
            return None
    return None


def _script_names(raw: Any) -> Tuple[str, ...]:
    if not isinstance(raw, list):
        return ()
    names: List[str] = []
    for script in cast(List[Any], raw):
        if isinstance(script, str):
            names.append(script)
        elif isinstance(script, dict):
            name = cast(Dict[str, Any], script).get("name")
            if name:
                names.append(str(name))
    return tuple(names)


def _reference(raw: Any) -> Optional[str]:
    # References are plain form id strings, or {"item": "..."} / {"object": "..."}
    if isinstance(raw, str):
        return raw or None
    if isinstance(raw, dict):
        data = cast(Dict[str, Any], raw)
        for key in ("item", "object"):
            if key in data:
                return _reference(data[key])
    return None


@dataclass(frozen=True)
class BookRecord:
    """A book as seen by the label classifier."""
    form_id: str
    name: Optional[str] = None
    teaches: Optional[SkillValue] = None
    scripts: Tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: GameDataObject) -> "BookRecord":
        """Create BookRecord from a raw BOOK record.

        Only a 'teaches' object with a 'skill' key counts as teaching a
        skill; books teaching a spell get teaches=None.
        """
        teaches = None
        raw_teaches = data.get("teaches")
        if isinstance(raw_teaches, dict):
            teaches = parse_skill(cast(Dict[str, Any], raw_teaches).get("skill"))

        name = data.get("name")
        return cls(
            form_id=str(data["id"]),
            name=str(name) if name is not None else None,
            teaches=teaches,
            scripts=_script_names(data.get("scripts")),
        )


@dataclass(frozen=True)
class QuestAlias:
    """One alias slot of a quest: a created object plus inventory items."""
    create_reference_to_object: Optional[str] = None
    items: Tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "QuestAlias":
        items: List[str] = []
        raw_items = data.get("items")
        if isinstance(raw_items, list):
            for raw in cast(List[Any], raw_items):
                ref = _reference(raw)
                if ref:
                    items.append(ref)
        return cls(
            create_reference_to_object=_reference(data.get("create_reference_to_object")),
            items=tuple(items),
        )


@dataclass(frozen=True)
class QuestRecord:
    """A quest and the aliases that may point at books."""
    form_id: str
    aliases: Tuple[QuestAlias, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: GameDataObject) -> "QuestRecord":
        raw_aliases = data.get("aliases")
        aliases: List[QuestAlias] = []
        if isinstance(raw_aliases, list):
            aliases = [
                QuestAlias.from_dict(cast(Dict[str, Any], alias))
                for alias in cast(List[Any], raw_aliases)
                if isinstance(alias, dict)
            ]
        return cls(form_id=str(data["id"]), aliases=tuple(aliases))
