"""Unit tests for vocabulary grouping and semantic detection."""
from __future__ import annotations

from dataclasses import dataclass

from hebrew_app.core.organizer import (
    MIXED,
    OTHER,
    detect_semantic_group,
    dominant_semantic_group,
    organize_words,
    suggest_study_days,
)


@dataclass
class Word:
    id: str
    english: str = ""
    notes: str = ""
    type: str = "Noun"
    semantic_group: str = "Objects & Things"
    frequency: int | None = None


def test_words_are_grouped_by_type_and_frequency() -> None:
    nouns = [Word(id=f"n{i}", frequency=20 - i) for i in range(20)]
    verbs = [Word(id="v1", type="Verb", semantic_group="Speech & Communication")]

    groups = organize_words(nouns + verbs)

    noun_groups = [group for group in groups if group.category == "Noun"]
    assert [len(group.words) for group in noun_groups] == [7, 7, 6]
    assert noun_groups[0].words[0].id == "n19"
    assert noun_groups[0].subcategory == "Objects & Things"

    verb_group = next(group for group in groups if group.category == "Verb")
    assert verb_group.subcategory == "Speech & Communication"


def test_unranked_words_sort_last() -> None:
    words = [Word(id="unranked"), Word(id="ranked", frequency=50)]
    (group,) = organize_words(words)
    assert [word.id for word in group.words] == ["ranked", "unranked"]


def test_dominant_semantic_group() -> None:
    same = [Word(id="a"), Word(id="b")]
    assert dominant_semantic_group(same) == "Objects & Things"

    majority = [Word(id="a"), Word(id="b"), Word(id="c", semantic_group="Body Parts")]
    assert dominant_semantic_group(majority) == "Objects & Things"

    split = [Word(id="a"), Word(id="b", semantic_group="Body Parts")]
    assert dominant_semantic_group(split) == MIXED


def test_suggest_study_days() -> None:
    assert suggest_study_days("Verb", 5) == 2
    assert suggest_study_days("Verb", 8) == 3
    assert suggest_study_days("Verb", 9) == 4
    assert suggest_study_days("Noun", 7) == 2
    assert suggest_study_days("Noun", 11) == 4
    assert suggest_study_days("Adjective", 10) == 3


def test_detect_semantic_group() -> None:
    assert detect_semantic_group("God", "", "Noun") == "Deity & Divine"
    assert detect_semantic_group("the heavens", "", "Noun") == "Objects & Things"
    assert detect_semantic_group("heaven", "", "Noun") == "Nature & Elements"
    assert detect_semantic_group("to say", "", "Verb") == "Speech & Communication"
    assert detect_semantic_group("to say", "", "Noun") == "Objects & Things"
    assert detect_semantic_group("good", "", "Adjective") == "Quality & Description"
    assert detect_semantic_group("and", "", "Conjunction") == "Logical Relations"
    assert detect_semantic_group("hallelujah", "", "Interjection") == OTHER
