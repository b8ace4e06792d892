"""Tests for flashcard grading, bulk updates and progress reports."""
from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import func, select

from hebrew_app.core.gamification import ensure_aware
from hebrew_app.db.models.progress import ReviewLog
from hebrew_app.services.progress import ProgressService
from hebrew_app.services.vocabulary import VocabularyService
from hebrew_app.utils.exceptions import NotFoundError

NOON = datetime(2026, 3, 2, 12, 0, tzinfo=timezone.utc)


def test_correct_card_updates_everything(db_session, learner, genesis_words) -> None:
    outcome = ProgressService(db_session).record_card_result(
        learner.id, word_id="genesis-1-bara", correct=True, now=NOON
    )

    assert outcome.progress.level == 1
    assert ensure_aware(outcome.progress.next_review) == NOON + timedelta(days=1)
    assert outcome.progress.review_count == 1
    assert outcome.progress.correct_count == 1

    stats = outcome.stats
    assert stats.total_reviews == 1
    assert stats.streak == 1
    assert stats.words_learned == 1
    assert stats.correct_run == 1
    assert outcome.daily_goal.cards_today == 1

    assert outcome.xp.xp_gained == 10
    assert outcome.xp.total_xp == 10
    assert [item.id for item in outcome.unlocked] == ["first-card"]
    # The first-card reward lands on top of the card XP.
    assert stats.xp == 20


def test_incorrect_card_resets_run_and_awards_no_xp(db_session, learner, genesis_words) -> None:
    service = ProgressService(db_session)
    service.record_card_result(learner.id, word_id="genesis-1-bara", correct=True, now=NOON)
    service.record_card_result(learner.id, word_id="genesis-1-bara", correct=True, now=NOON)

    outcome = service.record_card_result(
        learner.id, word_id="genesis-1-bara", correct=False, now=NOON
    )

    assert outcome.xp is None
    assert outcome.unlocked == []
    assert outcome.progress.level == 1
    assert outcome.progress.review_count == 3
    assert outcome.progress.correct_count == 2
    assert outcome.stats.correct_run == 0
    assert outcome.stats.total_reviews == 3
    assert outcome.daily_goal.cards_today == 3


def test_level_never_drops_below_zero(db_session, learner, genesis_words) -> None:
    outcome = ProgressService(db_session).record_card_result(
        learner.id, word_id="genesis-1-elohim", correct=False, now=NOON
    )

    assert outcome.progress.level == 0
    assert ensure_aware(outcome.progress.next_review) == NOON
    assert outcome.stats.words_learned == 0


def test_repeated_review_id_replays_first_outcome(db_session, learner, genesis_words) -> None:
    service = ProgressService(db_session)
    first = service.record_card_result(
        learner.id, word_id="genesis-1-bara", correct=True, review_id="r-1", now=NOON
    )
    second = service.record_card_result(
        learner.id, word_id="genesis-1-bara", correct=True, review_id="r-1", now=NOON
    )

    assert first.replayed is False
    assert second.replayed is True
    assert second.progress.review_count == 1
    assert second.stats.total_reviews == 1
    assert second.xp.xp_gained == 10
    assert second.unlocked == []
    logged = db_session.scalar(select(func.count(ReviewLog.id)))
    assert logged == 1


def test_unknown_word_raises_not_found(db_session, learner) -> None:
    with pytest.raises(NotFoundError):
        ProgressService(db_session).record_card_result(
            learner.id, word_id="missing", correct=True, now=NOON
        )


def test_update_progress_skips_xp_and_goal(db_session, learner, genesis_words) -> None:
    progress, stats = ProgressService(db_session).update_progress(
        learner.id, word_id="genesis-1-bara", correct=True, now=NOON
    )

    assert progress.level == 1
    assert stats.total_reviews == 1
    assert stats.xp == 0
    assert stats.cards_today == 0


def test_bulk_update_ignores_unknown_ids(db_session, learner, genesis_words) -> None:
    service = ProgressService(db_session)

    updated = service.bulk_update(
        learner.id, word_ids=["genesis-1-bara", "genesis-1-elohim", "missing"], action="learned", now=NOON
    )

    assert updated == 2
    _, rows = service.overview(learner.id)
    assert [row.word_id for row in rows] == ["genesis-1-bara", "genesis-1-elohim"]
    assert all(row.level == 1 for row in rows)
    assert all(ensure_aware(row.next_review) == NOON + timedelta(days=1) for row in rows)
    stats, _ = service.overview(learner.id)
    assert stats.words_learned == 2

    service.bulk_update(learner.id, word_ids=["genesis-1-bara"], action="needs-work", now=NOON)
    _, rows = service.overview(learner.id)
    bara = next(row for row in rows if row.word_id == "genesis-1-bara")
    assert bara.level == 0
    assert bara.review_count == 2
    stats, _ = service.overview(learner.id)
    assert stats.words_learned == 1


def test_summary_reports_levels_and_difficult_words(db_session, learner, genesis_words) -> None:
    service = ProgressService(db_session)
    service.record_card_result(learner.id, word_id="genesis-1-bara", correct=True, now=NOON)
    service.record_card_result(learner.id, word_id="genesis-1-elohim", correct=False, now=NOON)
    service.record_card_result(learner.id, word_id="genesis-1-elohim", correct=False, now=NOON)

    summary = service.summary(learner.id)

    assert summary.total_words == 4
    assert summary.learned == 1
    assert summary.mastered == 0
    assert summary.new_words == 2
    assert summary.learned_percentage == 25
    assert summary.total_reviews == 3
    assert summary.success_rate == 33
    assert summary.words_by_level == {0: 3, 1: 1, 2: 0, 3: 0, 4: 0, 5: 0, 6: 0}
    assert [word.word_id for word in summary.difficult_words] == ["genesis-1-elohim"]
    assert summary.difficult_words[0].success_rate == 0


def test_study_queue_serves_due_cards_then_new_ones(db_session, learner, genesis_words) -> None:
    service = ProgressService(db_session)

    fresh = service.study_queue(learner.id, now=NOON)
    assert fresh.review == []
    assert [card.id for card in fresh.new] == [
        "genesis-1-elohim",
        "genesis-1-shamayim",
        "genesis-1-bereshit",
        "genesis-1-bara",
    ]
    assert fresh.new_available == 4

    service.record_card_result(learner.id, word_id="genesis-1-bara", correct=True, now=NOON)

    same_day = service.study_queue(learner.id, now=NOON)
    assert same_day.due_count == 0
    assert same_day.new_available == 3

    next_day = service.study_queue(learner.id, max_new=1, now=NOON + timedelta(days=1))
    assert [card.id for card in next_day.review] == ["genesis-1-bara"]
    assert next_day.review[0].level == 1
    assert [card.id for card in next_day.new] == ["genesis-1-elohim"]


def test_study_queue_prefers_active_sets(db_session, learner, genesis_words, make_vocab_set) -> None:
    make_vocab_set("psalms", [{"trans": "tehillah", "english": "praise"}])
    service = ProgressService(db_session)
    VocabularyService(db_session).activate_only(learner.id, "psalms")

    queue = service.study_queue(learner.id, now=NOON)

    assert [card.id for card in queue.new] == ["psalms-tehillah"]
    assert queue.new_available == 1


def test_card_result_endpoint(client: TestClient, learner_headers, genesis_words) -> None:
    payload = {"word_id": "genesis-1-bara", "correct": True, "review_id": "abc"}

    response = client.post("/api/vocab/card-result", json=payload, headers=learner_headers)

    assert response.status_code == 200
    data = response.json()
    assert data["replayed"] is False
    assert data["word_progress"]["level"] == 1
    assert data["stats"]["total_reviews"] == 1
    assert data["xp"]["xp_gained"] == 10
    assert data["daily_goal"] == {
        "cards_today": 1,
        "daily_goal": 20,
        "progress": 5.0,
        "goal_complete": False,
    }
    assert "first-card" in {item["id"] for item in data["unlocked_achievements"]}

    replay = client.post("/api/vocab/card-result", json=payload, headers=learner_headers).json()
    assert replay["replayed"] is True
    assert replay["stats"]["total_reviews"] == 1

    missing = client.post(
        "/api/vocab/card-result", json={"word_id": "nope", "correct": True}, headers=learner_headers
    )
    assert missing.status_code == 404


def test_progress_endpoints(client: TestClient, learner_headers, genesis_words) -> None:
    client.post(
        "/api/vocab/progress/update",
        json={"word_id": "genesis-1-bara", "correct": False},
        headers=learner_headers,
    )
    bulk = client.post(
        "/api/vocab/progress/bulk-update",
        json={"word_ids": ["genesis-1-elohim"], "action": "learned"},
        headers=learner_headers,
    )
    assert bulk.json() == {"updated": 1, "action": "learned"}

    overview = client.get("/api/vocab/progress", headers=learner_headers).json()
    assert set(overview["word_progress"]) == {"genesis-1-bara", "genesis-1-elohim"}
    assert overview["stats"]["words_learned"] == 1

    summary = client.get("/api/vocab/stats", headers=learner_headers).json()
    assert summary["words_by_level"] == {"0": 3, "1": 1, "2": 0, "3": 0, "4": 0, "5": 0, "6": 0}


def test_bulk_update_rejects_unknown_action(client: TestClient, learner_headers) -> None:
    response = client.post(
        "/api/vocab/progress/bulk-update",
        json={"word_ids": ["x"], "action": "forgotten"},
        headers=learner_headers,
    )

    assert response.status_code == 400
