"""
Index of books that quests hand out or create.

Quests point at books only indirectly, through their aliases: an alias can
create a reference to an object, and can fill an inventory with items.
Every such reference that resolves to a book marks that book as a quest
book.
"""

import logging
from typing import Callable, FrozenSet, Iterable, Iterator, Optional, Set, TypeAlias

from ..game_data.models import BOOK_TYPE, GameDataObject, QuestAlias, QuestRecord

logger = logging.getLogger(__name__)

QuestBookIndex: TypeAlias = FrozenSet[str]
"""Form ids of books referenced by at least one quest."""

Resolver: TypeAlias = Callable[[str, str], Optional[GameDataObject]]
"""(form_id, expected_type) -> winning record, or None if unresolved."""

EMPTY_INDEX: QuestBookIndex = frozenset()


def _alias_references(alias: QuestAlias) -> Iterator[str]:
    if alias.create_reference_to_object:
        yield alias.create_reference_to_object
    yield from alias.items


def build_quest_book_index(
    quests: Iterable[QuestRecord], resolve: Resolver
) -> QuestBookIndex:
    """Collect the form ids of all books referenced from quest aliases.

    References that don't resolve, or resolve to something other than a
    book, are skipped.

    Args:
        quests: Quests to scan, in any order
        resolve: Reference resolver

    Returns:
        Frozen set of book form ids
    """
    logger.info("-" * 68)
    logger.info("Flipping through the quest library looking for books, please wait...")
    logger.info("-" * 68)

    books: Set[str] = set()
    quest_count = 0
    for quest in quests:
        quest_count += 1
        for alias in quest.aliases:
            for reference in _alias_references(alias):
                book = resolve(reference, BOOK_TYPE)
                if book is None:
                    continue
                books.add(str(book["id"]))

    logger.debug(f"Scanned {quest_count} quests, found {len(books)} quest books")
    return frozenset(books)
