"""Achievement catalog, unlock checks and listings."""
from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, List, Literal

from loguru import logger
from sqlalchemy import select
from sqlalchemy.orm import Session

from hebrew_app.core.gamification import to_local
from hebrew_app.db.models.achievement import Achievement, AchievementProgress
from hebrew_app.db.models.stats import UserStats
from hebrew_app.schemas.achievement import (
    AchievementListResponse,
    AchievementStatus,
    UnlockedAchievement,
)
from hebrew_app.services.stats import StatsService
from hebrew_app.utils.cache import ACHIEVEMENT_NAMESPACE, cache_backend

AchievementMetric = Literal[
    "total_reviews",
    "streak",
    "correct_run",
    "words_mastered",
    "early_bird",
    "night_owl",
    "speed_demon",
    "marathon",
]

EARLY_BIRD_HOUR = 8
NIGHT_OWL_HOUR = 22
SPEED_DEMON_CARDS = 20
SPEED_DEMON_SECONDS = 5 * 60
MARATHON_SECONDS = 30 * 60


@dataclass(frozen=True)
class AchievementDefinition:
    """Template for an achievement; ``metric`` must reach ``target`` to unlock."""

    id: str
    name: str
    description: str
    icon: str
    xp_reward: int
    metric: AchievementMetric
    target: int = 1


DEFAULT_ACHIEVEMENTS: tuple[AchievementDefinition, ...] = (
    AchievementDefinition("first-card", "First Steps", "Study your first card", "🎯", 10, "total_reviews", 1),
    AchievementDefinition("ten-cards", "Getting Started", "Study 10 cards", "📚", 50, "total_reviews", 10),
    AchievementDefinition("fifty-cards", "Dedicated Student", "Study 50 cards", "⭐", 100, "total_reviews", 50),
    AchievementDefinition("hundred-cards", "Century Club", "Study 100 cards", "💯", 250, "total_reviews", 100),
    AchievementDefinition("streak-3", "3-Day Streak", "Study 3 days in a row", "🔥", 75, "streak", 3),
    AchievementDefinition("streak-7", "Week Warrior", "Study 7 days in a row", "⚡", 200, "streak", 7),
    AchievementDefinition("streak-30", "Monthly Master", "Study 30 days in a row", "👑", 1000, "streak", 30),
    AchievementDefinition(
        "perfect-session", "Perfect Score", "Get 10 cards correct in a row", "🎖️", 150, "correct_run", 10
    ),
    AchievementDefinition("master-10", "Mastery Begins", "Master 10 words (level 5+)", "🌟", 200, "words_mastered", 10),
    AchievementDefinition("master-50", "Hebrew Scholar", "Master 50 words (level 5+)", "🎓", 500, "words_mastered", 50),
    AchievementDefinition("early-bird", "Early Bird", "Study before 8am", "🌅", 50, "early_bird"),
    AchievementDefinition("night-owl", "Night Owl", "Study after 10pm", "🦉", 50, "night_owl"),
    AchievementDefinition(
        "speed-demon", "Speed Demon", "Complete 20 cards in under 5 minutes", "⚡", 100, "speed_demon"
    ),
    AchievementDefinition("marathon", "Marathon Session", "Study for 30 minutes straight", "🏃", 300, "marathon"),
)


@dataclass
class AchievementContext:
    """Metric values observed by the request that triggers a check."""

    metrics: Dict[str, int] = field(default_factory=dict)

    @classmethod
    def from_stats(cls, stats: UserStats) -> "AchievementContext":
        return cls(
            metrics={
                "total_reviews": stats.total_reviews,
                "streak": stats.streak,
                "correct_run": stats.correct_run,
                "words_mastered": stats.words_mastered,
            }
        )

    @classmethod
    def from_review(cls, stats: UserStats, now: datetime) -> "AchievementContext":
        """Stats metrics plus the time-of-day badges for a card studied at ``now``."""

        context = cls.from_stats(stats)
        hour = to_local(now).hour
        context.metrics["early_bird"] = int(hour < EARLY_BIRD_HOUR)
        context.metrics["night_owl"] = int(hour >= NIGHT_OWL_HOUR)
        return context

    @classmethod
    def from_session(cls, duration_seconds: int, cards_studied: int) -> "AchievementContext":
        return cls(
            metrics={
                "speed_demon": int(
                    cards_studied >= SPEED_DEMON_CARDS and duration_seconds < SPEED_DEMON_SECONDS
                ),
                "marathon": int(duration_seconds >= MARATHON_SECONDS),
            }
        )


class AchievementService:
    """Manage the achievement catalog and learner unlocks."""

    def __init__(self, db: Session) -> None:
        self.db = db

    # ------------------------------------------------------------------
    # Catalog
    # ------------------------------------------------------------------
    def seed_achievements(
        self, definitions: tuple[AchievementDefinition, ...] = DEFAULT_ACHIEVEMENTS
    ) -> int:
        """Insert or refresh catalog rows; returns the number of new rows."""

        existing = {row.id: row for row in self.db.scalars(select(Achievement))}
        created = 0
        for defn in definitions:
            row = existing.get(defn.id)
            if row is None:
                row = Achievement(id=defn.id)
                self.db.add(row)
                created += 1
            row.name = defn.name
            row.description = defn.description
            row.icon = defn.icon
            row.xp_reward = defn.xp_reward
            row.metric = defn.metric
            row.target = defn.target
        self.db.flush()
        cache_backend.invalidate(ACHIEVEMENT_NAMESPACE)
        return created

    def ensure_catalog(self) -> None:
        """Insert any catalog rows missing from the database."""

        known = set(self.db.scalars(select(Achievement.id)))
        missing = tuple(defn for defn in DEFAULT_ACHIEVEMENTS if defn.id not in known)
        if missing:
            logger.info(f"Adding {len(missing)} missing achievement definitions")
            self.seed_achievements(missing)

    def catalog(self) -> List[dict]:
        """Return the catalog as plain dicts, cached between requests."""

        def load() -> List[dict]:
            self.ensure_catalog()
            rows = self.db.scalars(select(Achievement).order_by(Achievement.xp_reward, Achievement.id))
            return [
                {
                    "id": row.id,
                    "name": row.name,
                    "description": row.description,
                    "icon": row.icon,
                    "xp_reward": row.xp_reward,
                    "metric": row.metric,
                    "target": row.target,
                }
                for row in rows
            ]

        return cache_backend.get_or_set(ACHIEVEMENT_NAMESPACE, "catalog", load)

    # ------------------------------------------------------------------
    # Unlocking
    # ------------------------------------------------------------------
    def check_and_unlock(
        self,
        user_id: uuid.UUID,
        context: AchievementContext,
        *,
        stats: UserStats | None = None,
        now: datetime | None = None,
    ) -> List[UnlockedAchievement]:
        """Unlock every achievement whose metric has reached its target.

        Achievements are unlocked at most once; their XP reward is added to
        ``stats`` with the same atomic increment used for card XP.
        """

        eligible = [
            entry
            for entry in self.catalog()
            if entry["metric"] in context.metrics and context.metrics[entry["metric"]] >= entry["target"]
        ]
        if not eligible:
            return []

        eligible_ids = [entry["id"] for entry in eligible]
        progress_rows = {
            row.achievement_id: row
            for row in self.db.scalars(
                select(AchievementProgress).where(
                    AchievementProgress.user_id == user_id,
                    AchievementProgress.achievement_id.in_(eligible_ids),
                )
            )
        }

        now = now or datetime.now(timezone.utc)
        stats_service = StatsService(self.db)
        unlocked: List[UnlockedAchievement] = []
        for entry in eligible:
            progress = progress_rows.get(entry["id"])
            if progress is not None and progress.unlocked:
                continue
            if progress is None:
                progress = AchievementProgress(user_id=user_id, achievement_id=entry["id"])
                self.db.add(progress)
            progress.progress = entry["target"]
            progress.unlocked = True
            progress.unlocked_at = now
            self.db.flush()

            if entry["xp_reward"] > 0:
                if stats is None:
                    stats = stats_service.lock(user_id)
                stats_service.add_xp(stats, entry["xp_reward"])
            logger.info(f"User {user_id} unlocked achievement {entry['id']}")
            unlocked.append(UnlockedAchievement.model_validate(entry))
        return unlocked

    # ------------------------------------------------------------------
    # Listing
    # ------------------------------------------------------------------
    def list_for_user(self, user_id: uuid.UUID) -> AchievementListResponse:
        """Catalog with the learner's progress, unlocked first then by reward."""

        progress_rows = {
            row.achievement_id: row
            for row in self.db.scalars(
                select(AchievementProgress).where(AchievementProgress.user_id == user_id)
            )
        }
        stats = StatsService(self.db).get_or_create(user_id)
        live = AchievementContext.from_stats(stats).metrics
        items = []
        for entry in self.catalog():
            progress = progress_rows.get(entry["id"])
            unlocked = bool(progress and progress.unlocked)
            current = entry["target"] if unlocked else min(live.get(entry["metric"], 0), entry["target"])
            items.append(
                AchievementStatus(
                    id=entry["id"],
                    name=entry["name"],
                    description=entry["description"],
                    icon=entry["icon"],
                    xp_reward=entry["xp_reward"],
                    target=entry["target"],
                    progress=current,
                    unlocked=unlocked,
                    unlocked_at=progress.unlocked_at if progress else None,
                )
            )
        items.sort(key=lambda item: (not item.unlocked, item.xp_reward, item.id))
        unlocked_count = sum(1 for item in items if item.unlocked)
        return AchievementListResponse(
            achievements=items, unlocked_count=unlocked_count, total_count=len(items)
        )


__all__ = [
    "AchievementContext",
    "AchievementDefinition",
    "AchievementService",
    "DEFAULT_ACHIEVEMENTS",
]
