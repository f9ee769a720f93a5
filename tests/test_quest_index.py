"""Tests for the quest book index."""

from typing import Any, Dict, Optional

from booklabels.game_data import BOOK_TYPE, LoadOrderService, QuestAlias, QuestRecord
from booklabels.labeling import build_quest_book_index

RECORDS: Dict[str, Dict[str, Any]] = {
    "book_a": {"type": "BOOK", "id": "book_a"},
    "book_b": {"type": "BOOK", "id": "book_b"},
    "sword": {"type": "WEAP", "id": "sword"},
}


def resolve(form_id: str, expected_type: str) -> Optional[Dict[str, Any]]:
    record = RECORDS.get(form_id)
    if record is None or record["type"] != expected_type:
        return None
    return record


class TestBuildQuestBookIndex:
    """Index building from quest aliases."""

    def test_direct_and_item_slots(self) -> None:
        quest = QuestRecord(
            form_id="q1",
            aliases=(
                QuestAlias(create_reference_to_object="book_a"),
                QuestAlias(items=("sword", "book_b")),
            ),
        )
        assert build_quest_book_index([quest], resolve) == frozenset({"book_a", "book_b"})

    def test_both_slots_of_one_alias(self) -> None:
        alias = QuestAlias(create_reference_to_object="book_a", items=("book_b",))
        quest = QuestRecord(form_id="q1", aliases=(alias,))
        assert build_quest_book_index([quest], resolve) == frozenset({"book_a", "book_b"})

    def test_unresolvable_references_are_skipped(self) -> None:
        quest = QuestRecord(
            form_id="q1",
            aliases=(QuestAlias(create_reference_to_object="missing", items=("gone", "sword")),),
        )
        assert build_quest_book_index([quest], resolve) == frozenset()

    def test_no_quests(self) -> None:
        assert build_quest_book_index([], resolve) == frozenset()

    def test_empty_aliases(self) -> None:
        quest = QuestRecord(form_id="q1", aliases=(QuestAlias(),))
        assert build_quest_book_index([quest], resolve) == frozenset()

    def test_duplicates_collapse(self) -> None:
        quest = QuestRecord(
            form_id="q1",
            aliases=(QuestAlias(create_reference_to_object="book_a", items=("book_a",)),),
        )
        once = build_quest_book_index([quest], resolve)
        twice = build_quest_book_index([quest, quest], resolve)
        assert once == twice == frozenset({"book_a"})

    def test_order_independent(self) -> None:
        q1 = QuestRecord(form_id="q1", aliases=(QuestAlias(items=("book_a",)),))
        q2 = QuestRecord(form_id="q2", aliases=(QuestAlias(items=("book_b",)),))
        assert build_quest_book_index([q1, q2], resolve) == build_quest_book_index(
            [q2, q1], resolve
        )

    def test_resolver_receives_book_type(self) -> None:
        seen = []

        def recording_resolve(form_id: str, expected_type: str) -> None:
            seen.append(expected_type)
            return None

        quest = QuestRecord(form_id="q1", aliases=(QuestAlias(items=("book_a",)),))
        build_quest_book_index([quest], recording_resolve)
        assert seen == [BOOK_TYPE]


class TestIndexFromLoadOrder:
    """Index built against a loaded load order."""

    def test_sample_load_order(self, service: LoadOrderService) -> None:
        index = build_quest_book_index(service.winning_quests(), service.resolve)
        # The misc item and the missing plugin reference don't count
        assert index == frozenset({"00000003:Skyrim.esm"})
