"""Split a vocabulary set into evenly sized, learnable groups."""
from __future__ import annotations

import math
import re
from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable, Protocol

TARGET_GROUP_SIZE = 8
UNRANKED_FREQUENCY = 10000
MIXED = "Mixed"
OTHER = "Other"


class OrganizableWord(Protocol):
    id: str
    english: str
    notes: str
    type: str
    semantic_group: str
    frequency: int | None


@dataclass
class WordGroup:
    category: str
    subcategory: str | None
    words: list = field(default_factory=list)


def organize_words(words: Iterable[OrganizableWord]) -> list[WordGroup]:
    """Group words by part of speech, then cut each part into even chunks.

    Within a part of speech words are ordered by frequency rank (unranked
    last) and split into ``round(n / 8)`` groups of equal size.
    """

    by_type: dict[str, list[OrganizableWord]] = {}
    for word in words:
        by_type.setdefault(word.type, []).append(word)

    groups: list[WordGroup] = []
    for word_type, members in by_type.items():
        groups.extend(_even_groups(word_type, members))
    return groups


def _even_groups(word_type: str, words: list[OrganizableWord]) -> list[WordGroup]:
    if not words:
        return []
    ordered = sorted(words, key=lambda w: w.frequency or UNRANKED_FREQUENCY)
    num_groups = max(1, math.floor(len(ordered) / TARGET_GROUP_SIZE + 0.5))
    group_size = math.ceil(len(ordered) / num_groups)

    groups: list[WordGroup] = []
    for index in range(num_groups):
        chunk = ordered[index * group_size : (index + 1) * group_size]
        if not chunk:
            continue
        if len(chunk) == 1:
            subcategory = chunk[0].semantic_group or None
        else:
            subcategory = dominant_semantic_group(chunk)
        groups.append(WordGroup(category=word_type, subcategory=subcategory, words=chunk))
    return groups


def dominant_semantic_group(words: list[OrganizableWord]) -> str:
    """The shared semantic group, the majority one (> 50%), or ``Mixed``."""

    counts = Counter(word.semantic_group or OTHER for word in words)
    if len(counts) == 1:
        return next(iter(counts))
    most_common, count = counts.most_common(1)[0]
    if count / len(words) > 0.5:
        return most_common
    return MIXED


def suggest_study_days(category: str, word_count: int) -> int:
    """Days to spend on a group; verbs take longer than nouns."""

    if category == "Verb":
        limits = (5, 8)
    elif category == "Noun":
        limits = (7, 10)
    else:
        limits = (6, 10)
    if word_count <= limits[0]:
        return 2
    if word_count <= limits[1]:
        return 3
    return 4


# ----------------------------------------------------------------------
# Semantic group detection
# ----------------------------------------------------------------------
DEITY = "Deity & Divine"
NATURE_ELEMENTS = "Nature & Elements"
TIME = "Time & Periods"
PLACE = "Places & Locations"
PEOPLE = "People & Beings"
BODY_PARTS = "Body Parts"
OBJECTS = "Objects & Things"
CREATION = "Creation & Making"
MOVEMENT = "Movement & Motion"
SPEECH = "Speech & Communication"
PERCEPTION = "Perception (see/hear)"
STATE_OF_BEING = "State of Being"
ACTION = "Action & Doing"
SPATIAL = "Spatial Relations"
QUANTITY = "Quantity & Number"
QUALITY = "Quality & Description"
LOGICAL = "Logical Relations"


def _words(*terms: str) -> re.Pattern[str]:
    return re.compile(r"\b(" + "|".join(terms) + r")\b")


# (pattern, required word type or None, group); first match wins.
_SEMANTIC_RULES: tuple[tuple[re.Pattern[str], str | None, str], ...] = (
    (_words("god", "lord", "divine", "holy"), None, DEITY),
    (
        _words("heaven", "earth", "water", "light", "dark", "wind", "spirit", "sea",
               "mountain", "tree", "fire", "air"),
        None,
        NATURE_ELEMENTS,
    ),
    (
        _words("day", "night", "morning", "evening", "time", "year", "month", "week",
               "beginning", "end"),
        None,
        TIME,
    ),
    (_words("place", "city", "land", "country", "house", "temple", "field", "desert"), None, PLACE),
    (
        _words("man", "woman", "person", "people", "son", "daughter", "king", "prophet",
               "priest"),
        None,
        PEOPLE,
    ),
    (_words("hand", "eye", "face", "heart", "mouth", "ear", "foot", "head", "arm"), None, BODY_PARTS),
    (_words("create", "made", "make", "form", "build"), "Verb", CREATION),
    (_words("go", "come", "walk", "move", "rise", "fall", "enter", "exit"), "Verb", MOVEMENT),
    (_words("say", "said", "speak", "tell", "call", "name", "word"), "Verb", SPEECH),
    (_words("see", "saw", "hear", "look", "listen"), "Verb", PERCEPTION),
    (_words("be", "was", "is", "become", "exist"), "Verb", STATE_OF_BEING),
    (
        _words("on", "in", "under", "over", "between", "above", "below", "beside"),
        "Preposition",
        SPATIAL,
    ),
    (_words("number", "one", "two", "three", "many", "few", "all", "some"), None, QUANTITY),
)


def detect_semantic_group(english: str, notes: str, word_type: str) -> str:
    """Guess a semantic group from a gloss and notes when none was supplied."""

    combined = f"{english} {notes}".lower()
    for pattern, required_type, group in _SEMANTIC_RULES:
        if required_type is not None and word_type != required_type:
            continue
        if pattern.search(combined):
            return group

    if word_type == "Adjective":
        return QUALITY
    if word_type in {"Particle", "Conjunction"}:
        return LOGICAL
    if word_type == "Noun":
        return OBJECTS
    if word_type == "Verb":
        return ACTION
    return OTHER
