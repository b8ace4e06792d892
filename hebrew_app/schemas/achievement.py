"""Pydantic schemas for achievement endpoints."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from hebrew_app.schemas.common import UTCDateTime


class UnlockedAchievement(BaseModel):
    """An achievement unlocked by the request that returned it."""

    id: str
    name: str
    description: str
    icon: str
    xp_reward: int

    model_config = ConfigDict(from_attributes=True)


class AchievementStatus(UnlockedAchievement):
    """Catalog entry merged with the caller's progress."""

    target: int
    progress: int = 0
    unlocked: bool = False
    unlocked_at: UTCDateTime | None = None


class AchievementListResponse(BaseModel):
    achievements: list[AchievementStatus] = Field(default_factory=list)
    unlocked_count: int
    total_count: int


__all__ = ["AchievementListResponse", "AchievementStatus", "UnlockedAchievement"]
