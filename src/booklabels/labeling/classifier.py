"""
Book label classifier.

Each rule looks at one book and returns its label, or None when it does
not apply. A book's labels depend only on the book, the quest book index
and the label settings.
"""

import logging
from typing import List, Optional

from ..game_data.models import BookRecord, Skill
from ..settings.types import LabelSettings
from .labels import map_marker_label, quest_label, skill_label
from .quest_index import QuestBookIndex

logger = logging.getLogger(__name__)

MAP_MARKER_KEYWORD = "mapmarker"
QUEST_KEYWORD = "quest"


def skill_tag(book: BookRecord, settings: LabelSettings) -> Optional[str]:
    """Label for the skill a book teaches."""
    if not settings.add_skill_labels:
        return None
    if book.teaches is None or book.teaches == Skill.NONE:
        return None
    return skill_label(book.teaches, settings.label_format)


def map_marker_tag(book: BookRecord, settings: LabelSettings) -> Optional[str]:
    """Label for books carrying a map marker script."""
    if not settings.add_map_marker_labels:
        return None
    if any(MAP_MARKER_KEYWORD in script.lower() for script in book.scripts):
        return map_marker_label(settings.label_format)
    return None


def _quest_script(book: BookRecord, settings: LabelSettings) -> Optional[str]:
    for script in book.scripts:
        if settings.assume_all_scripts_are_quests or QUEST_KEYWORD in script.lower():
            return script
    return None


def quest_tag(
    book: BookRecord, index: QuestBookIndex, settings: LabelSettings
) -> Optional[str]:
    """Label for books used by a quest or carrying a quest script."""
    if not settings.add_quest_labels:
        return None

    if book.form_id not in index:
        script = _quest_script(book, settings)
        if script is None:
            return None
        logger.info(f"{book.form_id}: '{book.name}' has a quest script called '{script}'")

    return quest_label(settings.label_format)


def classify(
    book: BookRecord, index: QuestBookIndex, settings: LabelSettings
) -> List[str]:
    """Compute the labels for a book.

    Labels come in fixed order: skill, map marker, quest. An empty list
    means the book is left alone.
    """
    tags = [
        skill_tag(book, settings),
        map_marker_tag(book, settings),
        quest_tag(book, index, settings),
    ]
    return [tag for tag in tags if tag is not None]
