"""Study session endpoints and the daily study timer."""
from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from hebrew_app.api import deps
from hebrew_app.db.models.user import User
from hebrew_app.schemas.study import (
    SessionEndRequest,
    SessionEndResponse,
    SessionHeartbeatRequest,
    SessionHeartbeatResponse,
    SessionRead,
    SessionStartRequest,
    SessionStartResponse,
    TimeStatsResponse,
    TimerRead,
    TimerUpdateRequest,
    TimerUpdateResponse,
)
from hebrew_app.services.study import StudySessionService, StudyTimerService

router = APIRouter(prefix="/vocab", tags=["sessions"])
timer_router = APIRouter(prefix="/timer", tags=["timer"])


@router.post("/session/start", response_model=SessionStartResponse)
def start_session(
    payload: SessionStartRequest,
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_user),
) -> SessionStartResponse:
    session = StudySessionService(db).start(current_user.id, set_id=payload.set_id, mode=payload.mode)
    return SessionStartResponse(session_id=session.id, start_time=session.start_time)


@router.post("/session/heartbeat", response_model=SessionHeartbeatResponse)
def session_heartbeat(
    payload: SessionHeartbeatRequest,
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_user),
) -> SessionHeartbeatResponse:
    session = StudySessionService(db).heartbeat(current_user.id, payload.session_id)
    return SessionHeartbeatResponse(session_id=session.id, last_activity=session.last_activity)


@router.post("/session/end", response_model=SessionEndResponse)
def end_session(
    payload: SessionEndRequest,
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_user),
) -> SessionEndResponse:
    """Close the session and report any session achievements it earned."""

    session, unlocked = StudySessionService(db).end(
        current_user.id, payload.session_id, cards_studied=payload.cards_studied
    )
    return SessionEndResponse(session=SessionRead.model_validate(session), unlocked_achievements=unlocked)


@router.get("/stats/time", response_model=TimeStatsResponse)
def read_time_stats(
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_user),
) -> TimeStatsResponse:
    return StudySessionService(db).time_stats(current_user.id)


@timer_router.get("", response_model=TimerRead)
def read_timer(
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_user),
) -> TimerRead:
    """Seconds studied today according to the client timer."""

    return StudyTimerService(db).today(current_user.id)


@timer_router.post("/update", response_model=TimerUpdateResponse)
def update_timer(
    payload: TimerUpdateRequest,
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_user),
) -> TimerUpdateResponse:
    timer = StudyTimerService(db).add(current_user.id, payload.additional_seconds)
    return TimerUpdateResponse(date=timer.date, total_seconds=timer.total_seconds)
