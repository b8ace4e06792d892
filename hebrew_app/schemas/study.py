"""Schemas for timed study sessions and the daily study timer."""
from __future__ import annotations

import uuid
from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from hebrew_app.schemas.achievement import UnlockedAchievement
from hebrew_app.schemas.common import UTCDateTime


class SessionStartRequest(BaseModel):
    set_id: Optional[str] = None
    mode: str = Field(default="study", min_length=1, max_length=30)


class SessionStartResponse(BaseModel):
    session_id: uuid.UUID
    start_time: UTCDateTime


class SessionHeartbeatRequest(BaseModel):
    session_id: uuid.UUID


class SessionHeartbeatResponse(BaseModel):
    session_id: uuid.UUID
    last_activity: UTCDateTime


class SessionEndRequest(BaseModel):
    session_id: uuid.UUID
    cards_studied: int = Field(default=0, ge=0)


class SessionRead(BaseModel):
    id: uuid.UUID
    set_id: Optional[str] = None
    mode: str
    start_time: UTCDateTime
    end_time: Optional[UTCDateTime] = None
    duration_seconds: Optional[int] = None
    cards_studied: int

    model_config = ConfigDict(from_attributes=True)


class SessionEndResponse(BaseModel):
    session: SessionRead
    unlocked_achievements: list[UnlockedAchievement] = Field(default_factory=list)


class PeriodTotals(BaseModel):
    seconds: int
    minutes: int
    hours: Optional[int] = None


class TimeStatsResponse(BaseModel):
    day: PeriodTotals
    week: PeriodTotals
    month: PeriodTotals
    year: PeriodTotals
    total: PeriodTotals


class TimerRead(BaseModel):
    date: date
    total_seconds: int


class TimerUpdateRequest(BaseModel):
    additional_seconds: int = Field(ge=0, le=86400)


class TimerUpdateResponse(BaseModel):
    date: date
    total_seconds: int


__all__ = [
    "PeriodTotals",
    "SessionEndRequest",
    "SessionEndResponse",
    "SessionHeartbeatRequest",
    "SessionHeartbeatResponse",
    "SessionRead",
    "SessionStartRequest",
    "SessionStartResponse",
    "TimeStatsResponse",
    "TimerRead",
    "TimerUpdateRequest",
    "TimerUpdateResponse",
]
