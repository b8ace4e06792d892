"""Schemas for vocabulary sets and flashcards.

A card's ``extra_data`` depends on its ``card_type``; the card models below
form a union discriminated on that field so each payload is validated with
the right shape.
"""
from __future__ import annotations

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from hebrew_app.schemas.common import UTCDateTime


class VocabularyExtra(BaseModel):
    model_config = ConfigDict(extra="allow")


class AlphabetExtra(BaseModel):
    pronunciation: str
    sound: str


class SyllableExtra(BaseModel):
    syllables: str
    pronunciation: str
    syllable_type: str


class GrammarExtra(BaseModel):
    pronunciation: str
    grammar_type: str
    category: str
    explanation: str
    examples: list[str] = Field(default_factory=list)


class CardBase(BaseModel):
    """Card fields merged with the caller's review progress."""

    id: str
    hebrew: str
    trans: str
    english: str
    type: str
    notes: str = ""
    semantic_group: str = ""
    frequency: Optional[int] = None
    level: int = 0
    next_review: Optional[UTCDateTime] = None
    last_reviewed: Optional[UTCDateTime] = None
    review_count: int = 0
    correct_count: int = 0


class VocabularyCard(CardBase):
    card_type: Literal["vocabulary"] = "vocabulary"
    extra_data: VocabularyExtra = Field(default_factory=VocabularyExtra)


class AlphabetCard(CardBase):
    card_type: Literal["alphabet"]
    extra_data: AlphabetExtra


class SyllableCard(CardBase):
    card_type: Literal["syllable"]
    extra_data: SyllableExtra


class GrammarCard(CardBase):
    card_type: Literal["grammar"]
    extra_data: GrammarExtra


Card = Annotated[
    Union[VocabularyCard, AlphabetCard, SyllableCard, GrammarCard],
    Field(discriminator="card_type"),
]


class VocabGroupRead(BaseModel):
    category: str
    subcategory: Optional[str] = None
    words: list[Card] = Field(default_factory=list)


class VocabSetRead(BaseModel):
    id: str
    title: str
    description: str
    date_added: Optional[UTCDateTime] = None
    total_words: int
    is_active: bool
    set_type: str
    groups: list[VocabGroupRead] = Field(default_factory=list)


class VocabSetListResponse(BaseModel):
    sets: list[VocabSetRead] = Field(default_factory=list)


class ActiveSetsResponse(BaseModel):
    active_sets: list[VocabSetRead] = Field(default_factory=list)
    total_words: int


class ActivateSetResponse(BaseModel):
    active_set_id: str


class ToggleActiveRequest(BaseModel):
    set_id: str = Field(min_length=1)


class ToggleActiveResponse(BaseModel):
    set_id: str
    is_active: bool


class NewWord(BaseModel):
    """One word of an admin-pasted set."""

    hebrew: str = Field(min_length=1)
    trans: str = Field(min_length=1)
    english: str = Field(min_length=1)
    type: str = Field(min_length=1)
    category: str = Field(min_length=1)
    notes: str = ""
    semantic_group: Optional[str] = None
    frequency: Optional[int] = Field(default=None, ge=1)
    subcategory: Optional[str] = None


class VocabSetCreate(BaseModel):
    set_id: str = Field(min_length=1, max_length=100)
    title: str = Field(min_length=1, max_length=255)
    description: str = ""
    words: list[NewWord]


class CreatedSet(BaseModel):
    id: str
    title: str
    total_words: int


class CreatedWord(BaseModel):
    id: str
    hebrew: str
    trans: str
    english: str


class VocabSetCreateResponse(BaseModel):
    set: CreatedSet
    words: list[CreatedWord] = Field(default_factory=list)


class ReorganizeRequest(BaseModel):
    set_id: Optional[str] = None


class ReorganizedGroup(BaseModel):
    category: str
    subcategory: Optional[str] = None
    word_count: int
    suggested_days: int


class ReorganizedSet(BaseModel):
    set_id: str
    words_updated: int
    num_groups: int
    groups: list[ReorganizedGroup] = Field(default_factory=list)


class ReorganizeResponse(BaseModel):
    message: str
    sets: list[ReorganizedSet] = Field(default_factory=list)


class SeededSet(BaseModel):
    created: bool
    words: int


class SeedCategoriesResponse(BaseModel):
    message: str
    alphabet: SeededSet
    syllables: SeededSet
    grammar: SeededSet


class StudyQueueResponse(BaseModel):
    """Cards to study next: due reviews first, then unseen cards."""

    review: list[Card] = Field(default_factory=list)
    new: list[Card] = Field(default_factory=list)
    due_count: int
    new_available: int


__all__ = [
    "ActivateSetResponse",
    "ActiveSetsResponse",
    "AlphabetCard",
    "AlphabetExtra",
    "Card",
    "CreatedSet",
    "CreatedWord",
    "GrammarCard",
    "GrammarExtra",
    "NewWord",
    "ReorganizeRequest",
    "ReorganizeResponse",
    "ReorganizedGroup",
    "ReorganizedSet",
    "SeedCategoriesResponse",
    "SeededSet",
    "StudyQueueResponse",
    "SyllableCard",
    "SyllableExtra",
    "ToggleActiveRequest",
    "ToggleActiveResponse",
    "VocabGroupRead",
    "VocabSetCreate",
    "VocabSetCreateResponse",
    "VocabSetListResponse",
    "VocabSetRead",
    "VocabularyCard",
    "VocabularyExtra",
]
