"""
Label-related settings for booklabels.
"""

from typing import Any, TYPE_CHECKING

from .types import (
    ConfigError,
    EncapsulatingCharacters,
    LabelFormat,
    LabelPosition,
    LabelSettings,
    parse_enum,
)

if TYPE_CHECKING:
    from .store import SettingsStore

TRUE_STRINGS = ("true", "1", "yes")
FALSE_STRINGS = ("false", "0", "no")


class LabelOptions:
    """Manages the options that decide which labels are added and how they look."""

    def __init__(self, settings: "SettingsStore"):
        self.settings = settings

    def _get_bool(self, key: str, default: bool = False) -> bool:
        """Type-safe boolean retrieval from settings.

        Raises:
            ConfigError: If the value is neither a bool nor a true/false string
        """
        value = self.settings.value(key, default)
        if value is None:
            return default
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            lowered = value.strip().lower()
            if lowered in TRUE_STRINGS:
                return True
            if lowered in FALSE_STRINGS:
                return False
        raise ConfigError(f"Option '{key}' must be true or false, got {value!r}")

    def _get_raw(self, key: str, default: Any) -> Any:
        return self.settings.value(key, default)

    @property
    def label_format(self) -> LabelFormat:
        """Get label format (Long, Short or Star)."""
        value = self._get_raw("labelFormat", LabelFormat.SHORT)
        return parse_enum(LabelFormat, value, "labelFormat")

    @property
    def label_position(self) -> LabelPosition:
        """Get label position relative to the book name."""
        value = self._get_raw("labelPosition", LabelPosition.BEFORE_NAME)
        return parse_enum(LabelPosition, value, "labelPosition")

    @property
    def encapsulating_characters(self) -> EncapsulatingCharacters:
        """Get the bracket pair used around Long/Short labels."""
        value = self._get_raw("encapsulatingCharacters", EncapsulatingCharacters.CHEVRONS)
        return parse_enum(EncapsulatingCharacters, value, "encapsulatingCharacters")

    @property
    def add_skill_labels(self) -> bool:
        """Whether skill books get a skill label."""
        return self._get_bool("addSkillLabels", True)

    @property
    def add_map_marker_labels(self) -> bool:
        """Whether books with a map marker script get a map label."""
        return self._get_bool("addMapMarkerLabels", True)

    @property
    def add_quest_labels(self) -> bool:
        """Whether quest books get a quest label."""
        return self._get_bool("addQuestLabels", True)

    @property
    def assume_all_scripts_are_quests(self) -> bool:
        """Whether any scripted book counts as a quest book."""
        if self.settings.contains("assumeAllBehaviorsAreQuests"):
            return self._get_bool("assumeAllBehaviorsAreQuests", False)
        return self._get_bool("assumeBookScriptsAreQuests", False)

    def freeze(self) -> LabelSettings:
        """Snapshot the current options as an immutable LabelSettings.

        Raises:
            ConfigError: If any label option is not recognized
        """
        return LabelSettings(
            label_format=self.label_format,
            label_position=self.label_position,
            encapsulating_characters=self.encapsulating_characters,
            add_skill_labels=self.add_skill_labels,
            add_map_marker_labels=self.add_map_marker_labels,
            add_quest_labels=self.add_quest_labels,
            assume_all_scripts_are_quests=self.assume_all_scripts_are_quests,
        )
