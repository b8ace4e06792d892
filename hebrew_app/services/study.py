"""Timed study sessions, study-time rollups and the daily study timer."""
from __future__ import annotations

import uuid
from datetime import datetime, timedelta, timezone
from typing import List, Optional

from loguru import logger
from sqlalchemy import case, func, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session

from hebrew_app.core.gamification import ensure_aware, local_day
from hebrew_app.db.models.study import StudySession, StudyTime
from hebrew_app.schemas.achievement import UnlockedAchievement
from hebrew_app.schemas.study import PeriodTotals, TimeStatsResponse, TimerRead
from hebrew_app.services.achievement import AchievementContext, AchievementService
from hebrew_app.utils.exceptions import NotFoundError, ValidationError

# Rolling windows, in days, reported by ``time_stats``.
PERIODS = {"day": 1, "week": 7, "month": 30, "year": 365}


class SessionNotFoundError(NotFoundError):
    def __init__(self, session_id: uuid.UUID) -> None:
        super().__init__(f"Session {session_id} not found")


def _totals(seconds: int, *, with_hours: bool) -> PeriodTotals:
    return PeriodTotals(
        seconds=seconds,
        minutes=seconds // 60,
        hours=seconds // 3600 if with_hours else None,
    )


class StudySessionService:
    """Start, keep alive and end a learner's timed flashcard sessions."""

    def __init__(self, db: Session):
        self.db = db

    def _get_session(self, user_id: uuid.UUID, session_id: uuid.UUID) -> StudySession:
        session = self.db.get(StudySession, session_id)
        if session is None or session.user_id != user_id:
            raise SessionNotFoundError(session_id)
        return session

    def start(
        self,
        user_id: uuid.UUID,
        *,
        set_id: Optional[str] = None,
        mode: str = "study",
        now: datetime | None = None,
    ) -> StudySession:
        now = now or datetime.now(timezone.utc)
        session = StudySession(
            user_id=user_id,
            set_id=set_id,
            mode=mode,
            start_time=now,
            last_activity=now,
            cards_studied=0,
        )
        self.db.add(session)
        self.db.commit()
        logger.debug(f"User {user_id} started {mode} session {session.id}")
        return session

    def heartbeat(
        self, user_id: uuid.UUID, session_id: uuid.UUID, *, now: datetime | None = None
    ) -> StudySession:
        session = self._get_session(user_id, session_id)
        session.last_activity = now or datetime.now(timezone.utc)
        self.db.commit()
        return session

    def end(
        self,
        user_id: uuid.UUID,
        session_id: uuid.UUID,
        *,
        cards_studied: int = 0,
        now: datetime | None = None,
    ) -> tuple[StudySession, List[UnlockedAchievement]]:
        """Close a session, store its duration and check session achievements."""

        now = now or datetime.now(timezone.utc)
        session = self._get_session(user_id, session_id)
        if session.end_time is not None:
            raise ValidationError(f"Session {session_id} has already ended")

        duration = max(int((now - ensure_aware(session.start_time)).total_seconds()), 0)
        session.end_time = now
        session.last_activity = now
        session.duration_seconds = duration
        session.cards_studied = cards_studied
        self.db.flush()

        unlocked = AchievementService(self.db).check_and_unlock(
            user_id, AchievementContext.from_session(duration, cards_studied), now=now
        )
        self.db.commit()
        logger.info(
            f"User {user_id} ended session {session.id}: {duration}s, {cards_studied} cards"
        )
        return session, unlocked

    def time_stats(self, user_id: uuid.UUID, *, now: datetime | None = None) -> TimeStatsResponse:
        """Seconds studied in ended sessions over rolling windows and in total."""

        now = now or datetime.now(timezone.utc)
        columns = [
            func.coalesce(
                func.sum(
                    case(
                        (StudySession.start_time >= now - timedelta(days=days), StudySession.duration_seconds),
                        else_=0,
                    )
                ),
                0,
            )
            for days in PERIODS.values()
        ]
        columns.append(func.coalesce(func.sum(StudySession.duration_seconds), 0))
        row = self.db.execute(
            select(*columns).where(
                StudySession.user_id == user_id, StudySession.end_time.is_not(None)
            )
        ).one()
        day, week, month, year, total = (int(value or 0) for value in row)
        return TimeStatsResponse(
            day=_totals(day, with_hours=False),
            week=_totals(week, with_hours=False),
            month=_totals(month, with_hours=True),
            year=_totals(year, with_hours=True),
            total=_totals(total, with_hours=True),
        )


class StudyTimerService:
    """Per-day study time counter kept by the client-side timer."""

    def __init__(self, db: Session):
        self.db = db

    def today(self, user_id: uuid.UUID, *, now: datetime | None = None) -> TimerRead:
        day = local_day(now or datetime.now(timezone.utc))
        total = self.db.scalar(
            select(StudyTime.total_seconds).where(StudyTime.user_id == user_id, StudyTime.date == day)
        )
        return TimerRead(date=day, total_seconds=total or 0)

    def add(self, user_id: uuid.UUID, seconds: int, *, now: datetime | None = None) -> TimerRead:
        """Add ``seconds`` to today's row with a single upsert."""

        day = local_day(now or datetime.now(timezone.utc))
        dialect_insert = postgresql.insert if self.db.get_bind().dialect.name == "postgresql" else sqlite.insert
        stmt = dialect_insert(StudyTime).values(user_id=user_id, date=day, total_seconds=seconds)
        stmt = stmt.on_conflict_do_update(
            index_elements=[StudyTime.user_id, StudyTime.date],
            set_={"total_seconds": StudyTime.total_seconds + seconds, "updated_at": func.now()},
        )
        self.db.execute(stmt)
        self.db.commit()
        return self.today(user_id, now=now)


__all__ = ["PERIODS", "SessionNotFoundError", "StudySessionService", "StudyTimerService"]
