"""XP curve, streak and daily goal arithmetic.

Everything here is pure: callers pass the current counters and the study
day, and persist whatever comes back.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timezone
from zoneinfo import ZoneInfo

from hebrew_app.config import settings

# Cumulative XP needed to reach level ``index + 1``.
XP_PER_LEVEL: tuple[int, ...] = (
    0,
    100,
    250,
    500,
    1000,
    2000,
    3500,
    5500,
    8000,
    11000,
    15000,
    20000,
    26000,
    33000,
    41000,
)
MAX_LEVEL = len(XP_PER_LEVEL)

QUIZ_XP_PER_QUESTION = 10
QUIZ_PASS_BONUS = 50


def calculate_level(xp: int) -> int:
    """Return the highest level whose breakpoint ``xp`` has reached."""

    for index in range(len(XP_PER_LEVEL) - 1, -1, -1):
        if xp >= XP_PER_LEVEL[index]:
            return index + 1
    return 1


def xp_to_next_level(xp: int) -> int:
    """XP still missing for the next level, ``0`` once the curve is exhausted."""

    level = calculate_level(xp)
    if level >= MAX_LEVEL:
        return 0
    return XP_PER_LEVEL[level] - xp


# ----------------------------------------------------------------------
# Study days
# ----------------------------------------------------------------------
def study_zone() -> ZoneInfo:
    return ZoneInfo(settings.STUDY_TIMEZONE)


def ensure_aware(moment: datetime) -> datetime:
    """Treat naive timestamps (SQLite round trips) as UTC."""

    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment


def to_local(moment: datetime) -> datetime:
    return ensure_aware(moment).astimezone(study_zone())


def local_day(moment: datetime) -> date:
    """Calendar day of ``moment`` in the configured study timezone."""

    return to_local(moment).date()


def next_streak(current_streak: int, last_studied: date | None, today: date) -> int:
    """Apply one day of study to a streak.

    Same day keeps the streak, the following day extends it, and any gap (or
    a first ever session) starts over at 1.
    """

    if last_studied is None:
        return 1
    days_diff = (today - last_studied).days
    if days_diff == 0:
        return current_streak
    if days_diff == 1:
        return current_streak + 1
    return 1


@dataclass(frozen=True)
class DailyGoalStatus:
    cards_today: int
    daily_goal: int
    progress: float
    goal_complete: bool


def goal_status(cards_today: int, daily_goal: int) -> DailyGoalStatus:
    goal = max(daily_goal, 1)
    return DailyGoalStatus(
        cards_today=cards_today,
        daily_goal=goal,
        progress=min(cards_today / goal * 100, 100.0),
        goal_complete=cards_today >= goal,
    )


def advance_daily_goal(
    *,
    cards_today: int,
    last_reset: date | None,
    today: date,
    daily_goal: int,
    cards_studied: int = 1,
) -> DailyGoalStatus:
    """Count ``cards_studied`` towards today's goal, restarting on a new day."""

    if last_reset != today:
        counted = cards_studied
    else:
        counted = cards_today + cards_studied
    return goal_status(counted, daily_goal)


@dataclass(frozen=True)
class QuizReward:
    passed: bool
    correct_answers: int
    xp_for_answers: int
    bonus_xp: int

    @property
    def total_xp(self) -> int:
        return self.xp_for_answers + self.bonus_xp


def quiz_reward(*, correct_answers: int, score: int, min_score: int) -> QuizReward:
    passed = score >= min_score
    return QuizReward(
        passed=passed,
        correct_answers=correct_answers,
        xp_for_answers=correct_answers * QUIZ_XP_PER_QUESTION,
        bonus_xp=QUIZ_PASS_BONUS if passed else 0,
    )


__all__ = [
    "XP_PER_LEVEL",
    "MAX_LEVEL",
    "QUIZ_XP_PER_QUESTION",
    "QUIZ_PASS_BONUS",
    "DailyGoalStatus",
    "QuizReward",
    "advance_daily_goal",
    "calculate_level",
    "ensure_aware",
    "goal_status",
    "local_day",
    "next_streak",
    "quiz_reward",
    "study_zone",
    "to_local",
    "xp_to_next_level",
]
