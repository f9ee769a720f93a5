"""
Rendering of labels into book names.
"""

from typing import Dict, Sequence, Tuple

from ..settings.types import (
    ConfigError,
    EncapsulatingCharacters,
    LabelFormat,
    LabelPosition,
    LabelSettings,
)
from .labels import STAR_MARKER

TAG_SEPARATOR = "/"

BRACKETS: Dict[EncapsulatingCharacters, Tuple[str, str]] = {
    EncapsulatingCharacters.CHEVRONS: ("<", ">"),
    EncapsulatingCharacters.CURLY_BRACKETS: ("{", "}"),
    EncapsulatingCharacters.PARENTHESIS: ("(", ")"),
    EncapsulatingCharacters.SQUARE_BRACKETS: ("[", "]"),
    EncapsulatingCharacters.STARS: ("*", "*"),
}


def _place(existing_name: str, label: str, position: LabelPosition, separator: str) -> str:
    if position is LabelPosition.BEFORE_NAME:
        return f"{label}{separator}{existing_name}"
    if position is LabelPosition.AFTER_NAME:
        return f"{existing_name}{separator}{label}"
    raise ConfigError(f"Unsupported label position: {position!r}")


def bracket(label: str, characters: EncapsulatingCharacters) -> str:
    """Wrap a label in the configured bracket pair."""
    try:
        open_char, close_char = BRACKETS[characters]
    except KeyError:
        raise ConfigError(f"Unsupported encapsulating characters: {characters!r}") from None
    return f"{open_char}{label}{close_char}"


def format_label(tags: Sequence[str], existing_name: str, settings: LabelSettings) -> str:
    """Render tags into a new display name.

    Star format adds a single star however many tags there are. Long and
    Short formats join the tags with "/", bracket them and put them before
    or after the name, separated by one space.

    Args:
        tags: Labels in rule order
        existing_name: Current display name
        settings: Label settings

    Returns:
        The new name, or existing_name unchanged when there are no tags

    Raises:
        ConfigError: If a settings value is not a supported option
    """
    if not tags:
        return existing_name

    if settings.label_format is LabelFormat.STAR:
        return _place(existing_name, STAR_MARKER, settings.label_position, "")

    if settings.label_format not in (LabelFormat.LONG, LabelFormat.SHORT):
        raise ConfigError(f"Unsupported label format: {settings.label_format!r}")

    label = bracket(TAG_SEPARATOR.join(tags), settings.encapsulating_characters)
    return _place(existing_name, label, settings.label_position, " ")
