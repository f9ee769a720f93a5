"""Tests for the book label classifier."""

import logging
from dataclasses import replace

from booklabels.game_data import BookRecord, Skill
from booklabels.labeling import classify, map_marker_tag, quest_tag, skill_tag
from booklabels.settings import LabelFormat, LabelSettings

LONG = LabelSettings(label_format=LabelFormat.LONG)
SHORT = LabelSettings(label_format=LabelFormat.SHORT)
STAR = LabelSettings(label_format=LabelFormat.STAR)


def make_book(**kwargs) -> BookRecord:
    kwargs.setdefault("form_id", "00000001:Skyrim.esm")
    kwargs.setdefault("name", "Tome of Flames")
    return BookRecord(**kwargs)


class TestSkillRule:
    """Skill labels."""

    def test_long_label_uses_verbose_name(self) -> None:
        assert skill_tag(make_book(teaches=Skill.HeavyArmor), LONG) == "Heavy Armor"
        assert skill_tag(make_book(teaches=Skill.OneHanded), LONG) == "One-Handed"

    def test_long_label_falls_back_to_raw_name(self) -> None:
        assert skill_tag(make_book(teaches=Skill.Destruction), LONG) == "Destruction"

    def test_short_label_uses_abbreviation(self) -> None:
        assert skill_tag(make_book(teaches=Skill.Destruction), SHORT) == "Dest"
        assert skill_tag(make_book(teaches=Skill.TwoHanded), SHORT) == "2H"
        assert skill_tag(make_book(teaches=Skill.Restoration), SHORT) == "Resto"

    def test_unknown_skill_value_uses_raw_value(self) -> None:
        assert skill_tag(make_book(teaches=42), SHORT) == "42"

    def test_star_label(self) -> None:
        assert skill_tag(make_book(teaches=Skill.Sneak), STAR) == "*"

    def test_none_sentinel_never_labeled(self) -> None:
        assert skill_tag(make_book(teaches=Skill.NONE), LONG) is None
        assert skill_tag(make_book(teaches=-1), SHORT) is None

    def test_no_skill_taught(self) -> None:
        assert skill_tag(make_book(), LONG) is None

    def test_disabled(self) -> None:
        settings = replace(LONG, add_skill_labels=False)
        assert skill_tag(make_book(teaches=Skill.Alchemy), settings) is None


class TestMapMarkerRule:
    """Map marker labels."""

    def test_substring_match_is_case_insensitive(self) -> None:
        book = make_book(scripts=("dunREADMAPMARKERscript",))
        assert map_marker_tag(book, LONG) == "Map Marker"
        assert map_marker_tag(book, SHORT) == "Map"
        assert map_marker_tag(book, STAR) == "*"

    def test_no_matching_script(self) -> None:
        assert map_marker_tag(make_book(scripts=("SomeOtherScript",)), LONG) is None
        assert map_marker_tag(make_book(), LONG) is None

    def test_disabled(self) -> None:
        settings = replace(LONG, add_map_marker_labels=False)
        assert map_marker_tag(make_book(scripts=("MapMarker",)), settings) is None


class TestQuestRule:
    """Quest labels."""

    def test_indexed_book(self) -> None:
        book = make_book()
        assert quest_tag(book, frozenset({book.form_id}), LONG) == "Quest"
        assert quest_tag(book, frozenset({book.form_id}), SHORT) == "Q"

    def test_quest_script(self) -> None:
        book = make_book(scripts=("MS07questBookScript",))
        assert quest_tag(book, frozenset(), SHORT) == "Q"

    def test_quest_script_is_reported(self, caplog) -> None:
        book = make_book(scripts=("MS07questBookScript",))
        with caplog.at_level(logging.INFO, logger="booklabels.labeling.classifier"):
            quest_tag(book, frozenset(), SHORT)
        records = [r for r in caplog.records if "has a quest script called" in r.getMessage()]
        assert len(records) == 1
        assert records[0].levelno == logging.INFO
        assert records[0].getMessage() == (
            "00000001:Skyrim.esm: 'Tome of Flames' has a quest script called 'MS07questBookScript'"
        )

    def test_assume_all_scripts_are_quests(self) -> None:
        settings = replace(SHORT, assume_all_scripts_are_quests=True)
        assert quest_tag(make_book(scripts=("BookScript",)), frozenset(), settings) == "Q"

    def test_assume_needs_at_least_one_script(self) -> None:
        settings = replace(SHORT, assume_all_scripts_are_quests=True)
        assert quest_tag(make_book(), frozenset(), settings) is None

    def test_unrelated_book(self) -> None:
        book = make_book(scripts=("BookScript",))
        assert quest_tag(book, frozenset({"other"}), SHORT) is None

    def test_disabled(self) -> None:
        settings = replace(SHORT, add_quest_labels=False)
        book = make_book()
        assert quest_tag(book, frozenset({book.form_id}), settings) is None


class TestClassify:
    """Rule composition."""

    def test_fixed_rule_order(self) -> None:
        book = make_book(teaches=Skill.Illusion, scripts=("QF_MapMarkerQuest",))
        assert classify(book, frozenset(), SHORT) == ["Illu", "Map", "Q"]

    def test_no_labels(self) -> None:
        assert classify(make_book(), frozenset(), LONG) == []

    def test_pure(self) -> None:
        book = make_book(teaches=Skill.Block, scripts=("MapMarker",))
        index = frozenset({book.form_id})
        assert classify(book, index, LONG) == classify(book, index, LONG)
