"""Flashcard review processing and progress reporting.

``record_card_result`` is the single write path for a graded card: SRS
scheduling, streak, review counters, XP, daily goal and achievements all
change inside one transaction while the learner's stats row is locked.
"""
from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import List, Optional

from loguru import logger
from sqlalchemy import func, or_, select
from sqlalchemy.orm import Session

from hebrew_app.config import settings
from hebrew_app.core.gamification import DailyGoalStatus, local_day
from hebrew_app.core.srs import (
    LEARNED_LEVEL,
    MASTERED_LEVEL,
    MAX_LEVEL,
    is_due,
    schedule_review,
    success_rate,
)
from hebrew_app.db.models.progress import ReviewLog, UserProgress
from hebrew_app.db.models.stats import UserStats
from hebrew_app.db.models.vocabulary import VocabSet, VocabWord
from hebrew_app.schemas.achievement import UnlockedAchievement
from hebrew_app.schemas.progress import DifficultWord, VocabSummary
from hebrew_app.schemas.vocabulary import StudyQueueResponse
from hebrew_app.services.achievement import AchievementContext, AchievementService
from hebrew_app.services.stats import StatsService, XPResult
from hebrew_app.services.vocabulary import VocabularyService, card_payload
from hebrew_app.utils.exceptions import NotFoundError

DIFFICULT_THRESHOLD = 50
DIFFICULT_WORDS_LIMIT = 10


@dataclass
class CardOutcome:
    """Everything a graded card changed, ready to be rendered."""

    progress: UserProgress
    stats: UserStats
    daily_goal: DailyGoalStatus
    xp: Optional[XPResult] = None
    unlocked: List[UnlockedAchievement] = field(default_factory=list)
    replayed: bool = False


class ProgressService:
    """Review flashcards and report learner progress."""

    def __init__(self, db: Session):
        self.db = db
        self.stats = StatsService(db)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _get_word(self, word_id: str) -> VocabWord:
        word = self.db.get(VocabWord, word_id)
        if word is None:
            raise NotFoundError(f"Word '{word_id}' not found")
        return word

    def _get_progress(self, user_id: uuid.UUID, word_id: str) -> Optional[UserProgress]:
        return self.db.scalar(
            select(UserProgress).where(
                UserProgress.user_id == user_id, UserProgress.word_id == word_id
            )
        )

    def _apply_review(
        self, user_id: uuid.UUID, word_id: str, correct: bool, now: datetime
    ) -> tuple[UserProgress, int]:
        """Schedule the card and bump its counters; returns the row and old level."""

        progress = self._get_progress(user_id, word_id)
        level_before = progress.level if progress else 0
        schedule = schedule_review(level_before, correct, now)
        if progress is None:
            progress = UserProgress(
                user_id=user_id,
                word_id=word_id,
                level=schedule.level,
                next_review=schedule.next_review,
                last_reviewed=schedule.reviewed_at,
                review_count=1,
                correct_count=1 if correct else 0,
            )
            self.db.add(progress)
        else:
            progress.level = schedule.level
            progress.next_review = schedule.next_review
            progress.last_reviewed = schedule.reviewed_at
            progress.review_count = UserProgress.review_count + 1
            if correct:
                progress.correct_count = UserProgress.correct_count + 1
        self.db.flush()
        self.db.refresh(progress)
        return progress, level_before

    def _find_review(self, user_id: uuid.UUID, review_id: str) -> Optional[ReviewLog]:
        return self.db.scalar(
            select(ReviewLog).where(ReviewLog.user_id == user_id, ReviewLog.review_id == review_id)
        )

    # ------------------------------------------------------------------
    # Card results
    # ------------------------------------------------------------------
    def record_card_result(
        self,
        user_id: uuid.UUID,
        *,
        word_id: str,
        correct: bool,
        review_id: str | None = None,
        now: datetime | None = None,
    ) -> CardOutcome:
        """Apply one graded answer; a known ``review_id`` replays the first outcome."""

        now = now or datetime.now(timezone.utc)
        self._get_word(word_id)
        stats = self.stats.lock(user_id)

        if review_id is not None:
            previous = self._find_review(user_id, review_id)
            if previous is not None:
                logger.info(f"Replaying review {review_id} for user {user_id}")
                return self._replay(user_id, stats, previous, now)

        progress, level_before = self._apply_review(user_id, word_id, correct, now)
        self.stats.register_study(stats, now)
        self.stats.increment_reviews(stats)
        self.stats.refresh_word_counts(stats)
        self.stats.record_answer(stats, correct)

        xp_result = None
        if correct:
            xp_result = self.stats.add_xp(stats, settings.XP_PER_CORRECT)
        daily_goal = self.stats.advance_daily_goal(stats, 1, now)

        unlocked: List[UnlockedAchievement] = []
        if correct:
            unlocked = AchievementService(self.db).check_and_unlock(
                user_id, AchievementContext.from_review(stats, now), stats=stats, now=now
            )

        self.db.add(
            ReviewLog(
                user_id=user_id,
                word_id=word_id,
                review_id=review_id,
                correct=correct,
                level_before=level_before,
                level_after=progress.level,
                xp_gained=xp_result.xp_gained if xp_result else 0,
                reviewed_at=now,
            )
        )
        self.db.commit()
        return CardOutcome(
            progress=progress,
            stats=stats,
            daily_goal=daily_goal,
            xp=xp_result,
            unlocked=unlocked,
        )

    def _replay(
        self, user_id: uuid.UUID, stats: UserStats, review: ReviewLog, now: datetime
    ) -> CardOutcome:
        progress = self._get_progress(user_id, review.word_id)
        xp_result = None
        if review.xp_gained:
            xp_result = XPResult(
                xp_gained=review.xp_gained,
                total_xp=stats.xp,
                level=stats.level,
                leveled_up=False,
                old_level=stats.level,
                new_level=stats.level,
                xp_to_next_level=StatsService.to_read(stats).xp_to_next_level,
            )
        self.db.commit()
        return CardOutcome(
            progress=progress,
            stats=stats,
            daily_goal=self.stats.daily_goal_status(stats, local_day(now)),
            xp=xp_result,
            replayed=True,
        )

    def update_progress(
        self, user_id: uuid.UUID, *, word_id: str, correct: bool, now: datetime | None = None
    ) -> tuple[UserProgress, UserStats]:
        """Record a review without XP or daily goal credit."""

        now = now or datetime.now(timezone.utc)
        self._get_word(word_id)
        stats = self.stats.lock(user_id)
        progress, _ = self._apply_review(user_id, word_id, correct, now)
        self.stats.register_study(stats, now)
        self.stats.increment_reviews(stats)
        self.stats.refresh_word_counts(stats)
        self.db.commit()
        return progress, stats

    def bulk_update(
        self,
        user_id: uuid.UUID,
        *,
        word_ids: List[str],
        action: str,
        now: datetime | None = None,
    ) -> int:
        """Mark many of the learner's cards as learned or as needing work.

        Unknown word ids are ignored; the count of updated cards is returned.
        """

        now = now or datetime.now(timezone.utc)
        stats = self.stats.lock(user_id)
        known_ids = list(
            self.db.scalars(select(VocabWord.id).where(VocabWord.id.in_(set(word_ids))))
        )
        existing = {
            row.word_id: row
            for row in self.db.scalars(
                select(UserProgress).where(
                    UserProgress.user_id == user_id, UserProgress.word_id.in_(known_ids)
                )
            )
        }

        learned = action == "learned"
        level = LEARNED_LEVEL if learned else 0
        next_review = now + timedelta(days=1) if learned else now
        for word_id in known_ids:
            progress = existing.get(word_id)
            if progress is None:
                self.db.add(
                    UserProgress(
                        user_id=user_id,
                        word_id=word_id,
                        level=level,
                        next_review=next_review,
                        last_reviewed=now,
                        review_count=1,
                        correct_count=1 if learned else 0,
                    )
                )
                continue
            progress.level = level
            progress.next_review = next_review
            progress.last_reviewed = now
            progress.review_count = UserProgress.review_count + 1
            if learned:
                progress.correct_count = UserProgress.correct_count + 1

        self.db.flush()
        self.stats.refresh_word_counts(stats)
        self.db.commit()
        logger.info(f"User {user_id} marked {len(known_ids)} words as {action}")
        return len(known_ids)

    # ------------------------------------------------------------------
    # Reports
    # ------------------------------------------------------------------
    def overview(self, user_id: uuid.UUID) -> tuple[UserStats, List[UserProgress]]:
        stats = self.stats.get_or_create(user_id)
        rows = list(
            self.db.scalars(
                select(UserProgress)
                .where(UserProgress.user_id == user_id)
                .order_by(UserProgress.word_id)
            )
        )
        return stats, rows

    def summary(self, user_id: uuid.UUID) -> VocabSummary:
        """Counts, percentages and trouble spots across every card."""

        total_words = VocabularyService(self.db).count_words()
        rows = list(
            self.db.execute(
                select(UserProgress, VocabWord)
                .join(VocabWord, VocabWord.id == UserProgress.word_id)
                .where(UserProgress.user_id == user_id)
            )
        )

        by_level = {level: 0 for level in range(MAX_LEVEL + 1)}
        learned = mastered = reviewed = total_reviews = total_correct = 0
        difficult: List[DifficultWord] = []
        for progress, word in rows:
            by_level[min(max(progress.level, 0), MAX_LEVEL)] += 1
            learned += progress.level >= LEARNED_LEVEL
            mastered += progress.level >= MASTERED_LEVEL
            reviewed += progress.review_count > 0
            total_reviews += progress.review_count
            total_correct += progress.correct_count
            rate = success_rate(progress.review_count, progress.correct_count)
            if progress.review_count > 0 and rate < DIFFICULT_THRESHOLD:
                difficult.append(
                    DifficultWord(
                        word_id=word.id,
                        hebrew=word.hebrew,
                        english=word.english,
                        review_count=progress.review_count,
                        success_rate=rate,
                    )
                )
        # Cards never reviewed still sit at level 0.
        by_level[0] += max(total_words - len(rows), 0)
        difficult.sort(key=lambda item: (item.success_rate, -item.review_count, item.word_id))

        return VocabSummary(
            total_words=total_words,
            learned=learned,
            mastered=mastered,
            new_words=max(total_words - reviewed, 0),
            learned_percentage=success_rate(total_words, learned),
            mastered_percentage=success_rate(total_words, mastered),
            total_reviews=total_reviews,
            success_rate=success_rate(total_reviews, total_correct),
            words_by_level=by_level,
            difficult_words=difficult[:DIFFICULT_WORDS_LIMIT],
        )

    def study_queue(
        self,
        user_id: uuid.UUID,
        *,
        max_review: int = 10,
        max_new: int = 5,
        now: datetime | None = None,
    ) -> StudyQueueResponse:
        """Due reviews (oldest first) followed by new cards from the active sets.

        When the learner has no active set every set is used.
        """

        today = local_day(now or datetime.now(timezone.utc))
        vocab = VocabularyService(self.db)
        set_ids = sorted(vocab.active_set_ids(user_id)) or list(
            self.db.scalars(select(VocabSet.id))
        )

        review_rows = [
            (word, progress)
            for word, progress in self.db.execute(
                select(VocabWord, UserProgress)
                .join(UserProgress, UserProgress.word_id == VocabWord.id)
                .where(
                    UserProgress.user_id == user_id,
                    UserProgress.level >= LEARNED_LEVEL,
                    VocabWord.set_id.in_(set_ids),
                )
                .order_by(UserProgress.next_review, VocabWord.id)
            )
            if is_due(progress.level, progress.next_review, today)
        ]

        join_on = (UserProgress.word_id == VocabWord.id) & (UserProgress.user_id == user_id)
        unseen = (
            VocabWord.set_id.in_(set_ids),
            or_(UserProgress.id.is_(None), UserProgress.level < LEARNED_LEVEL),
        )
        new_available = self.db.scalar(
            select(func.count(VocabWord.id))
            .select_from(VocabWord)
            .outerjoin(UserProgress, join_on)
            .where(*unseen)
        ) or 0
        new_stmt = (
            select(VocabWord, UserProgress)
            .outerjoin(UserProgress, join_on)
            .where(*unseen)
        )
        new_rows = self.db.execute(
            new_stmt.order_by(
                VocabWord.set_id,
                VocabWord.group_category,
                VocabWord.group_subcategory,
                VocabWord.frequency.asc().nulls_last(),
                VocabWord.id,
            ).limit(max_new)
        ).all()

        return StudyQueueResponse(
            review=[card_payload(word, progress) for word, progress in review_rows[:max_review]],
            new=[card_payload(word, progress) for word, progress in new_rows],
            due_count=len(review_rows),
            new_available=new_available,
        )


__all__ = ["CardOutcome", "ProgressService"]
