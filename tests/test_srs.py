"""Unit tests for the spaced repetition schedule."""
from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

from hebrew_app.core.srs import MAX_LEVEL, SRS_INTERVALS, is_due, schedule_review, success_rate

NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def test_correct_answer_moves_card_up_one_level() -> None:
    schedule = schedule_review(0, True, NOW)
    assert schedule.level == 1
    assert schedule.next_review == NOW + timedelta(days=1)
    assert schedule.reviewed_at == NOW

    schedule = schedule_review(4, True, NOW)
    assert schedule.level == 5
    assert schedule.next_review == NOW + timedelta(days=30)


def test_levels_are_clamped() -> None:
    assert schedule_review(MAX_LEVEL, True, NOW).level == MAX_LEVEL
    assert schedule_review(MAX_LEVEL, True, NOW).next_review == NOW + timedelta(days=90)
    assert schedule_review(0, False, NOW).level == 0
    assert schedule_review(0, False, NOW).next_review == NOW


def test_wrong_answer_drops_one_level() -> None:
    schedule = schedule_review(3, False, NOW)
    assert schedule.level == 2
    assert schedule.next_review == NOW + timedelta(days=SRS_INTERVALS[2])


def test_is_due_only_for_learned_cards() -> None:
    today = date(2024, 5, 1)
    assert is_due(0, NOW - timedelta(days=3), today) is False
    assert is_due(1, NOW - timedelta(days=1), today) is True
    assert is_due(1, NOW, today) is True
    assert is_due(2, NOW + timedelta(days=1), today) is False
    assert is_due(2, None, today) is True


def test_success_rate_rounds_half_up() -> None:
    assert success_rate(0, 0) == 0
    assert success_rate(3, 2) == 67
    assert success_rate(8, 5) == 63
    assert success_rate(200, 1) == 1
    assert success_rate(4, 4) == 100
