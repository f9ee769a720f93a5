"""
Label text for each rule and label format.
"""

from typing import Dict

from ..game_data.models import Skill, SkillValue
from ..settings.types import ConfigError, LabelFormat

STAR_MARKER = "*"

LONG_SKILL_LABELS: Dict[Skill, str] = {
    Skill.HeavyArmor: "Heavy Armor",
    Skill.LightArmor: "Light Armor",
    Skill.OneHanded: "One-Handed",
    Skill.TwoHanded: "Two-Handed",
}

SHORT_SKILL_LABELS: Dict[Skill, str] = {
    Skill.Alchemy: "Alch",
    Skill.Alteration: "Altr",
    Skill.Archery: "Arch",
    Skill.Block: "Blck",
    Skill.Conjuration: "Conj",
    Skill.Destruction: "Dest",
    Skill.Enchanting: "Ench",
    Skill.HeavyArmor: "H.Arm",
    Skill.Illusion: "Illu",
    Skill.LightArmor: "L.Arm",
    Skill.Lockpicking: "Lock",
    Skill.OneHanded: "1H",
    Skill.Pickpocket: "Pick",
    Skill.Restoration: "Resto",
    Skill.Smithing: "Smith",
    Skill.Sneak: "Snk",
    Skill.Speech: "Spch",
    Skill.TwoHanded: "2H",
}

MAP_MARKER_LABELS: Dict[LabelFormat, str] = {
    LabelFormat.LONG: "Map Marker",
    LabelFormat.SHORT: "Map",
    LabelFormat.STAR: STAR_MARKER,
}

QUEST_LABELS: Dict[LabelFormat, str] = {
    LabelFormat.LONG: "Quest",
    LabelFormat.SHORT: "Q",
    LabelFormat.STAR: STAR_MARKER,
}


def raw_skill_name(skill: SkillValue) -> str:
    """Name of a skill as stored, e.g. "Destruction", or "42" for unknown values."""
    return skill.name if isinstance(skill, Skill) else str(skill)


def _fixed_label(table: Dict[LabelFormat, str], label_format: LabelFormat) -> str:
    try:
        return table[label_format]
    except KeyError:
        raise ConfigError(f"Unsupported label format: {label_format!r}") from None


def skill_label(skill: SkillValue, label_format: LabelFormat) -> str:
    """Label for a taught skill in the given format."""
    if label_format is LabelFormat.LONG:
        table = LONG_SKILL_LABELS
    elif label_format is LabelFormat.SHORT:
        table = SHORT_SKILL_LABELS
    elif label_format is LabelFormat.STAR:
        return STAR_MARKER
    else:
        raise ConfigError(f"Unsupported label format: {label_format!r}")

    if isinstance(skill, Skill) and skill in table:
        return table[skill]
    return raw_skill_name(skill)


def map_marker_label(label_format: LabelFormat) -> str:
    """Label for books with a map marker script."""
    return _fixed_label(MAP_MARKER_LABELS, label_format)


def quest_label(label_format: LabelFormat) -> str:
    """Label for quest books."""
    return _fixed_label(QUEST_LABELS, label_format)
