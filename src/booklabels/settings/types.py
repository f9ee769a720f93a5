"""
Configuration type definitions and exceptions for booklabels.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Type, TypeVar


class ConfigError(Exception):
    """Raised when configuration is invalid or cannot be accessed."""
    pass


@dataclass
class ValidationResult:
    """Result of configuration validation."""
    is_valid: bool
    errors: List[str]
    warnings: List[str]


class LabelFormat(Enum):
    """How much text a label carries."""
    LONG = "Long"
    SHORT = "Short"
    STAR = "Star"


class LabelPosition(Enum):
    """Where the label goes relative to the existing name."""
    BEFORE_NAME = "Before_Name"
    AFTER_NAME = "After_Name"


class EncapsulatingCharacters(Enum):
    """Bracket pair wrapped around Long/Short labels."""
    CHEVRONS = "Chevrons"
    CURLY_BRACKETS = "Curly_Brackets"
    PARENTHESIS = "Parenthesis"
    SQUARE_BRACKETS = "Square_Brackets"
    STARS = "Stars"


E = TypeVar("E", bound=Enum)


def _normalize(text: str) -> str:
    return text.replace("_", "").replace(" ", "").lower()


def parse_enum(enum_cls: Type[E], value: Any, key: str) -> E:
    """Parse a settings value into a member of enum_cls.

    Member names and values are both accepted, compared case-insensitively
    with underscores ignored, so "Before_Name", "BeforeName" and
    "BEFORE_NAME" all map to LabelPosition.BEFORE_NAME.

    Raises:
        ConfigError: If the value matches no member
    """
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        wanted = _normalize(value)
        for member in enum_cls:
            if wanted in (_normalize(member.name), _normalize(str(member.value))):
                return member
    allowed = ", ".join(str(member.value) for member in enum_cls)
    raise ConfigError(f"Unsupported value for '{key}': {value!r} (expected one of: {allowed})")


@dataclass(frozen=True)
class LabelSettings:
    """Immutable label options for one patcher run."""
    label_format: LabelFormat = LabelFormat.SHORT
    label_position: LabelPosition = LabelPosition.BEFORE_NAME
    encapsulating_characters: EncapsulatingCharacters = EncapsulatingCharacters.CHEVRONS
    add_skill_labels: bool = True
    add_map_marker_labels: bool = True
    add_quest_labels: bool = True
    assume_all_scripts_are_quests: bool = False
