"""Tests for study sessions, study-time rollups and the daily timer."""
from __future__ import annotations

import uuid
from datetime import date, datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from hebrew_app.services.study import SessionNotFoundError, StudySessionService, StudyTimerService
from hebrew_app.utils.exceptions import ValidationError

START = datetime(2026, 3, 2, 9, 0, tzinfo=timezone.utc)


def _studied(service: StudySessionService, user_id, start: datetime, seconds: int, cards: int = 0):
    session = service.start(user_id, now=start)
    return service.end(user_id, session.id, cards_studied=cards, now=start + timedelta(seconds=seconds))


def test_end_session_records_duration(db_session, learner) -> None:
    service = StudySessionService(db_session)

    session, unlocked = _studied(service, learner.id, START, 200, cards=25)

    assert session.duration_seconds == 200
    assert session.cards_studied == 25
    assert [item.id for item in unlocked] == ["speed-demon"]


def test_long_session_unlocks_marathon(db_session, learner) -> None:
    _, unlocked = _studied(StudySessionService(db_session), learner.id, START, 31 * 60, cards=5)

    assert [item.id for item in unlocked] == ["marathon"]


def test_ending_twice_is_rejected(db_session, learner) -> None:
    service = StudySessionService(db_session)
    session, _ = _studied(service, learner.id, START, 60)

    with pytest.raises(ValidationError):
        service.end(learner.id, session.id, now=START + timedelta(minutes=5))


def test_sessions_are_private(db_session, learner) -> None:
    service = StudySessionService(db_session)
    session = service.start(learner.id, now=START)

    with pytest.raises(SessionNotFoundError):
        service.heartbeat(uuid.uuid4(), session.id, now=START)


def test_time_stats_use_rolling_windows(db_session, learner) -> None:
    service = StudySessionService(db_session)
    _studied(service, learner.id, START, 1800)
    _studied(service, learner.id, START - timedelta(days=3), 3600)
    _studied(service, learner.id, START - timedelta(days=20), 5400)
    _studied(service, learner.id, START - timedelta(days=200), 7200)
    service.start(learner.id, now=START)

    stats = service.time_stats(learner.id, now=START + timedelta(hours=2))

    assert stats.day.seconds == 1800
    assert stats.day.minutes == 30
    assert stats.day.hours is None
    assert stats.week.seconds == 5400
    assert stats.month.seconds == 10800
    assert stats.month.hours == 3
    assert stats.year.seconds == 18000
    assert stats.total.hours == 5


def test_timer_accumulates_per_day(db_session, learner) -> None:
    timer = StudyTimerService(db_session)

    timer.add(learner.id, 120, now=START)
    today = timer.add(learner.id, 30, now=START + timedelta(hours=1))
    tomorrow = timer.add(learner.id, 45, now=START + timedelta(days=1))

    assert today.date == date(2026, 3, 2)
    assert today.total_seconds == 150
    assert tomorrow.total_seconds == 45
    assert timer.today(learner.id, now=START).total_seconds == 150


def test_session_endpoints(client: TestClient, learner_headers) -> None:
    started = client.post("/api/vocab/session/start", json={"mode": "review"}, headers=learner_headers)
    assert started.status_code == 200
    session_id = started.json()["session_id"]

    heartbeat = client.post(
        "/api/vocab/session/heartbeat", json={"session_id": session_id}, headers=learner_headers
    )
    assert heartbeat.json()["session_id"] == session_id

    ended = client.post(
        "/api/vocab/session/end",
        json={"session_id": session_id, "cards_studied": 3},
        headers=learner_headers,
    )
    assert ended.status_code == 200
    session = ended.json()["session"]
    assert session["mode"] == "review"
    assert session["cards_studied"] == 3
    assert session["end_time"] is not None

    again = client.post("/api/vocab/session/end", json={"session_id": session_id}, headers=learner_headers)
    assert again.status_code == 400

    stats = client.get("/api/vocab/stats/time", headers=learner_headers).json()
    assert set(stats) == {"day", "week", "month", "year", "total"}
    assert stats["week"]["hours"] is None


def test_unknown_session_returns_404(client: TestClient, learner_headers) -> None:
    response = client.post(
        "/api/vocab/session/heartbeat", json={"session_id": str(uuid.uuid4())}, headers=learner_headers
    )

    assert response.status_code == 404


def test_timer_endpoints(client: TestClient, learner_headers) -> None:
    assert client.get("/api/timer", headers=learner_headers).json()["total_seconds"] == 0

    client.post("/api/timer/update", json={"additional_seconds": 90}, headers=learner_headers)
    updated = client.post("/api/timer/update", json={"additional_seconds": 10}, headers=learner_headers)

    assert updated.json()["total_seconds"] == 100
    assert client.get("/api/timer", headers=learner_headers).json()["total_seconds"] == 100

    rejected = client.post("/api/timer/update", json={"additional_seconds": -5}, headers=learner_headers)
    assert rejected.status_code == 400
