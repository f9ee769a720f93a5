"""
Book patcher: labels every eligible book of a load order.

The run has two phases. The quest book index is built first, once, and
only when quest labels are enabled. Books are then classified one by one
against that finished index; a book gets a name override only when at
least one label applies.
"""

import logging
from dataclasses import dataclass
from typing import List

from ..game_data.models import BOOK_TYPE, BookRecord
from ..game_data.patch import PatchPlugin
from ..game_data.service import LoadOrderService
from ..settings.types import LabelSettings
from .classifier import classify
from .formatter import format_label
from .quest_index import EMPTY_INDEX, QuestBookIndex, build_quest_book_index


@dataclass(frozen=True)
class LabelChange:
    """One renamed book."""
    form_id: str
    old_name: str
    new_name: str
    tags: tuple[str, ...]

    def __str__(self) -> str:
        return f"{self.form_id}: '{self.old_name}' -> '{self.new_name}'"


class BookPatcher:
    """Adds labels to book names and records the overrides in a patch."""

    def __init__(
        self,
        service: LoadOrderService,
        settings: LabelSettings,
        patch: PatchPlugin,
    ):
        """Initialize the patcher.

        Args:
            service: Loaded load order to read books and quests from
            settings: Label settings for this run
            patch: Patch receiving the name overrides
        """
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.service = service
        self.settings = settings
        self.patch = patch
        # Index used by the last run
        self.quest_index: QuestBookIndex = EMPTY_INDEX

    def build_index(self) -> QuestBookIndex:
        """Scan the winning quests for the books their aliases use.

        Returns the empty index without reading any quest when quest
        labels are disabled.
        """
        if not self.settings.add_quest_labels:
            return EMPTY_INDEX
        return build_quest_book_index(self.service.winning_quests(), self.service.resolve)

    def run(self) -> List[LabelChange]:
        """Label all winning books of the load order.

        The quest book index is built completely before the first book is
        classified.

        Returns:
            The renamed books, in the order they were processed
        """
        self.quest_index = self.build_index()
        changes: List[LabelChange] = []
        skipped = 0

        for record in self.service.iter_winning_records(BOOK_TYPE):
            book = BookRecord.from_dict(record)
            if book.name is None:
                skipped += 1
                continue

            tags = classify(book, self.quest_index, self.settings)
            if not tags:
                continue

            new_name = format_label(tags, book.name, self.settings)
            self.patch.set_name(record, new_name)

            change = LabelChange(book.form_id, book.name, new_name, tuple(tags))
            self.logger.info(str(change))
            changes.append(change)

        self.logger.info(
            f"Labeled {len(changes)} books ({skipped} unnamed books skipped)"
        )
        return changes
