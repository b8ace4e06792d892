"""Schemas for flashcard review results and progress summaries."""
from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from hebrew_app.schemas.achievement import UnlockedAchievement
from hebrew_app.schemas.common import UTCDateTime
from hebrew_app.schemas.stats import DailyGoalRead, StatsRead, XPRead


class WordProgressRead(BaseModel):
    word_id: str
    level: int
    next_review: Optional[UTCDateTime] = None
    last_reviewed: Optional[UTCDateTime] = None
    review_count: int
    correct_count: int

    model_config = ConfigDict(from_attributes=True)


class CardResultRequest(BaseModel):
    """A graded flashcard answer.

    ``review_id`` is an optional client-generated key; resending the same key
    returns the first outcome instead of counting the answer twice.
    """

    word_id: str = Field(min_length=1)
    correct: bool
    review_id: Optional[str] = Field(default=None, min_length=1, max_length=100)


class CardResultResponse(BaseModel):
    replayed: bool = False
    word_progress: WordProgressRead
    stats: StatsRead
    xp: Optional[XPRead] = None
    daily_goal: DailyGoalRead
    unlocked_achievements: list[UnlockedAchievement] = Field(default_factory=list)


class ProgressUpdateRequest(BaseModel):
    word_id: str = Field(min_length=1)
    correct: bool


class ProgressUpdateResponse(BaseModel):
    word_progress: WordProgressRead
    stats: StatsRead


BulkAction = Literal["learned", "needs-work"]


class BulkUpdateRequest(BaseModel):
    word_ids: list[str] = Field(min_length=1)
    action: BulkAction


class BulkUpdateResponse(BaseModel):
    updated: int
    action: BulkAction


class ProgressOverview(BaseModel):
    stats: StatsRead
    word_progress: dict[str, WordProgressRead] = Field(default_factory=dict)


class DifficultWord(BaseModel):
    word_id: str
    hebrew: str
    english: str
    review_count: int
    success_rate: int


class VocabSummary(BaseModel):
    total_words: int
    learned: int
    mastered: int
    new_words: int
    learned_percentage: int
    mastered_percentage: int
    total_reviews: int
    success_rate: int
    words_by_level: dict[int, int] = Field(default_factory=dict)
    difficult_words: list[DifficultWord] = Field(default_factory=list)


__all__ = [
    "BulkAction",
    "BulkUpdateRequest",
    "BulkUpdateResponse",
    "CardResultRequest",
    "CardResultResponse",
    "DifficultWord",
    "ProgressOverview",
    "ProgressUpdateRequest",
    "ProgressUpdateResponse",
    "VocabSummary",
    "WordProgressRead",
]
