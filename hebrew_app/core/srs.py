"""Leitner-style spaced repetition schedule used for flashcards."""
from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date, datetime, timedelta

from hebrew_app.core.gamification import local_day

# Days until the next review for each level.
SRS_INTERVALS: dict[int, int] = {0: 0, 1: 1, 2: 3, 3: 7, 4: 14, 5: 30, 6: 90}
MAX_LEVEL = 6
LEARNED_LEVEL = 1
MASTERED_LEVEL = 5


@dataclass(frozen=True)
class ReviewSchedule:
    level: int
    next_review: datetime
    reviewed_at: datetime


def next_level(level: int, correct: bool) -> int:
    if correct:
        return min(level + 1, MAX_LEVEL)
    return max(level - 1, 0)


def schedule_review(level: int, correct: bool, now: datetime) -> ReviewSchedule:
    """Move a card one level up or down and compute its next due date."""

    new_level = next_level(max(level, 0), correct)
    return ReviewSchedule(
        level=new_level,
        next_review=now + timedelta(days=SRS_INTERVALS[new_level]),
        reviewed_at=now,
    )


def is_due(level: int, next_review: datetime | None, today: date) -> bool:
    """Whether a learned card should be reviewed on ``today``.

    New cards (level 0) are never "due"; they are served from the new-card pool.
    """

    if level < LEARNED_LEVEL:
        return False
    if next_review is None:
        return True
    return local_day(next_review) <= today


def success_rate(review_count: int, correct_count: int) -> int:
    if review_count <= 0:
        return 0
    return math.floor(correct_count / review_count * 100 + 0.5)
