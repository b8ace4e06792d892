"""Per-learner XP, level, streak and daily goal bookkeeping.

Every mutation goes through a ``user_stats`` row locked with
``SELECT ... FOR UPDATE`` and counters are bumped with ``col = col + n`` in
SQL, so concurrent requests from the same learner never lose updates.
Callers own the transaction and commit once per request.
"""
from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import date, datetime, timezone

from loguru import logger
from sqlalchemy import case, func, select, update
from sqlalchemy.orm import Session

from hebrew_app.config import settings
from hebrew_app.core.gamification import (
    DailyGoalStatus,
    advance_daily_goal,
    calculate_level,
    goal_status,
    local_day,
    next_streak,
    xp_to_next_level,
)
from hebrew_app.core.srs import LEARNED_LEVEL, MASTERED_LEVEL
from hebrew_app.db.models.progress import UserProgress
from hebrew_app.db.models.stats import UserStats
from hebrew_app.schemas.stats import StatsRead


@dataclass(frozen=True)
class XPResult:
    xp_gained: int
    total_xp: int
    level: int
    leveled_up: bool
    old_level: int
    new_level: int
    xp_to_next_level: int


class StatsService:
    """Read and update the ``user_stats`` singleton of a learner."""

    def __init__(self, db: Session):
        self.db = db

    # ------------------------------------------------------------------
    # Row access
    # ------------------------------------------------------------------
    def get_or_create(self, user_id: uuid.UUID) -> UserStats:
        stats = self.db.scalar(select(UserStats).where(UserStats.user_id == user_id))
        if stats is not None:
            return stats
        stats = UserStats(
            user_id=user_id,
            total_reviews=0,
            words_learned=0,
            words_mastered=0,
            streak=0,
            longest_streak=0,
            correct_run=0,
            xp=0,
            level=1,
            daily_goal=settings.DEFAULT_DAILY_GOAL,
            cards_today=0,
        )
        self.db.add(stats)
        self.db.flush()
        return stats

    def lock(self, user_id: uuid.UUID) -> UserStats:
        """Return the learner's stats row locked until the transaction ends."""

        self.get_or_create(user_id)
        stmt = (
            select(UserStats)
            .where(UserStats.user_id == user_id)
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        return self.db.scalars(stmt).one()

    def _increment(self, stats: UserStats, **deltas: int) -> None:
        self.db.flush()
        values = {name: getattr(UserStats, name) + delta for name, delta in deltas.items()}
        self.db.execute(
            update(UserStats)
            .where(UserStats.id == stats.id)
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        self.db.refresh(stats)

    # ------------------------------------------------------------------
    # Counters
    # ------------------------------------------------------------------
    def add_xp(self, stats: UserStats, amount: int) -> XPResult:
        """Grant ``amount`` XP and move the level to match the new total."""

        old_level = stats.level
        self._increment(stats, xp=amount)
        new_level = calculate_level(stats.xp)
        if new_level != stats.level:
            stats.level = new_level
            self.db.flush()
        if new_level > old_level:
            logger.info(f"User {stats.user_id} reached level {new_level} with {stats.xp} XP")
        return XPResult(
            xp_gained=amount,
            total_xp=stats.xp,
            level=new_level,
            leveled_up=new_level > old_level,
            old_level=old_level,
            new_level=new_level,
            xp_to_next_level=xp_to_next_level(stats.xp),
        )

    def register_study(self, stats: UserStats, now: datetime | None = None) -> int:
        """Record study activity at ``now`` and return the updated streak."""

        now = now or datetime.now(timezone.utc)
        last_day = local_day(stats.last_studied) if stats.last_studied else None
        stats.streak = next_streak(stats.streak, last_day, local_day(now))
        stats.longest_streak = max(stats.longest_streak, stats.streak)
        stats.last_studied = now
        self.db.flush()
        return stats.streak

    def increment_reviews(self, stats: UserStats, count: int = 1) -> None:
        self._increment(stats, total_reviews=count)

    def record_answer(self, stats: UserStats, correct: bool) -> int:
        """Extend or reset the consecutive-correct run."""

        if correct:
            self._increment(stats, correct_run=1)
        else:
            stats.correct_run = 0
            self.db.flush()
        return stats.correct_run

    def refresh_word_counts(self, stats: UserStats) -> None:
        """Recount learned (level >= 1) and mastered (level >= 5) words."""

        self.db.flush()
        learned, mastered = self.db.execute(
            select(
                func.count(case((UserProgress.level >= LEARNED_LEVEL, 1))),
                func.count(case((UserProgress.level >= MASTERED_LEVEL, 1))),
            ).where(UserProgress.user_id == stats.user_id)
        ).one()
        stats.words_learned = learned or 0
        stats.words_mastered = mastered or 0
        self.db.flush()

    # ------------------------------------------------------------------
    # Daily goal
    # ------------------------------------------------------------------
    def advance_daily_goal(
        self, stats: UserStats, cards_studied: int = 1, now: datetime | None = None
    ) -> DailyGoalStatus:
        """Count cards towards today's goal, starting a fresh count on a new day."""

        today = local_day(now or datetime.now(timezone.utc))
        status = advance_daily_goal(
            cards_today=stats.cards_today,
            last_reset=stats.last_goal_reset,
            today=today,
            daily_goal=stats.daily_goal,
            cards_studied=cards_studied,
        )
        if stats.last_goal_reset != today:
            stats.cards_today = status.cards_today
            stats.last_goal_reset = today
            self.db.flush()
        else:
            self._increment(stats, cards_today=cards_studied)
        current = goal_status(stats.cards_today, stats.daily_goal)
        if current.goal_complete and stats.cards_today - cards_studied < stats.daily_goal:
            logger.info(f"User {stats.user_id} completed the daily goal of {stats.daily_goal}")
        return current

    def daily_goal_status(self, stats: UserStats, today: date | None = None) -> DailyGoalStatus:
        """Goal progress as of ``today``; a count from a previous day reads as zero."""

        today = today or local_day(datetime.now(timezone.utc))
        cards = stats.cards_today if stats.last_goal_reset == today else 0
        return goal_status(cards, stats.daily_goal)

    def set_daily_goal(self, stats: UserStats, daily_goal: int) -> UserStats:
        stats.daily_goal = daily_goal
        self.db.flush()
        return stats

    # ------------------------------------------------------------------
    # Presentation
    # ------------------------------------------------------------------
    @staticmethod
    def to_read(stats: UserStats) -> StatsRead:
        read = StatsRead.model_validate(stats)
        read.xp_to_next_level = xp_to_next_level(stats.xp)
        return read


__all__ = ["StatsService", "XPResult"]
