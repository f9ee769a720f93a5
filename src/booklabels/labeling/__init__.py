"""
Book labeling: quest book index, classifier, formatter and patcher.
"""

from .quest_index import QuestBookIndex, EMPTY_INDEX, build_quest_book_index
from .classifier import classify, skill_tag, map_marker_tag, quest_tag
from .formatter import format_label, bracket
from .labels import skill_label, map_marker_label, quest_label, STAR_MARKER
from .patcher import BookPatcher, LabelChange

__all__ = [
    "QuestBookIndex",
    "EMPTY_INDEX",
    "build_quest_book_index",
    "classify",
    "skill_tag",
    "map_marker_tag",
    "quest_tag",
    "format_label",
    "bracket",
    "skill_label",
    "map_marker_label",
    "quest_label",
    "STAR_MARKER",
    "BookPatcher",
    "LabelChange",
]
