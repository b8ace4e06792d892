"""Schemas for XP, level, streak and daily goal counters."""
from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from hebrew_app.schemas.achievement import UnlockedAchievement
from hebrew_app.schemas.common import UTCDateTime


class StatsRead(BaseModel):
    """Snapshot of a learner's ``user_stats`` row."""

    last_studied: Optional[UTCDateTime] = None
    total_reviews: int
    words_learned: int
    words_mastered: int
    streak: int
    longest_streak: int
    xp: int
    level: int
    xp_to_next_level: int = 0
    daily_goal: int
    cards_today: int
    last_goal_reset: Optional[date] = None

    model_config = ConfigDict(from_attributes=True)


class XPRead(BaseModel):
    xp_gained: int
    total_xp: int
    level: int
    leveled_up: bool
    old_level: int
    new_level: int
    xp_to_next_level: int

    model_config = ConfigDict(from_attributes=True)


class DailyGoalRead(BaseModel):
    cards_today: int
    daily_goal: int
    progress: float
    goal_complete: bool

    model_config = ConfigDict(from_attributes=True)


class XPAddRequest(BaseModel):
    xp_amount: int = Field(gt=0, description="XP to grant; must be positive")
    reason: Optional[str] = Field(default=None, max_length=255)


class XPAddResponse(XPRead):
    unlocked_achievements: list[UnlockedAchievement] = Field(default_factory=list)


class DailyGoalUpdateRequest(BaseModel):
    cards_studied: int = Field(default=1, ge=1)


class DailyGoalSetRequest(BaseModel):
    daily_goal: int = Field(ge=1, le=1000)


__all__ = [
    "DailyGoalRead",
    "DailyGoalSetRequest",
    "DailyGoalUpdateRequest",
    "StatsRead",
    "XPAddRequest",
    "XPAddResponse",
    "XPRead",
]
