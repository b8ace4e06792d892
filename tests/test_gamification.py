"""Unit tests for XP levels, streaks, daily goals and quiz rewards."""
from __future__ import annotations

from datetime import date, datetime, timezone

import pytest

from hebrew_app.core.gamification import (
    XP_PER_LEVEL,
    advance_daily_goal,
    calculate_level,
    ensure_aware,
    goal_status,
    local_day,
    next_streak,
    quiz_reward,
    xp_to_next_level,
)


@pytest.mark.parametrize(
    ("xp", "level"),
    [(0, 1), (99, 1), (100, 2), (249, 2), (250, 3), (1000, 5), (40999, 14), (41000, 15), (999999, 15)],
)
def test_calculate_level_uses_cumulative_breakpoints(xp: int, level: int) -> None:
    assert calculate_level(xp) == level


def test_xp_to_next_level() -> None:
    assert xp_to_next_level(0) == 100
    assert xp_to_next_level(120) == 130
    assert xp_to_next_level(XP_PER_LEVEL[-1]) == 0


def test_next_streak_rules() -> None:
    today = date(2024, 3, 10)
    assert next_streak(0, None, today) == 1
    assert next_streak(4, today, today) == 4
    assert next_streak(4, date(2024, 3, 9), today) == 5
    assert next_streak(4, date(2024, 3, 7), today) == 1


def test_daily_goal_restarts_on_a_new_day() -> None:
    today = date(2024, 3, 10)

    same_day = advance_daily_goal(
        cards_today=19, last_reset=today, today=today, daily_goal=20, cards_studied=1
    )
    assert same_day.cards_today == 20
    assert same_day.goal_complete is True
    assert same_day.progress == 100.0

    next_day = advance_daily_goal(
        cards_today=19, last_reset=date(2024, 3, 9), today=today, daily_goal=20, cards_studied=1
    )
    assert next_day.cards_today == 1
    assert next_day.goal_complete is False


def test_goal_progress_is_capped() -> None:
    status = goal_status(45, 20)
    assert status.progress == 100.0
    assert status.goal_complete is True
    assert goal_status(5, 20).progress == 25.0


def test_quiz_reward_adds_pass_bonus() -> None:
    passed = quiz_reward(correct_answers=4, score=80, min_score=80)
    assert passed.passed is True
    assert passed.total_xp == 4 * 10 + 50

    failed = quiz_reward(correct_answers=3, score=60, min_score=80)
    assert failed.passed is False
    assert failed.bonus_xp == 0
    assert failed.total_xp == 30


def test_naive_datetimes_are_utc() -> None:
    naive = datetime(2024, 3, 10, 23, 30)
    assert ensure_aware(naive).tzinfo == timezone.utc
    assert local_day(naive) == date(2024, 3, 10)
