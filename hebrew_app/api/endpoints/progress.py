"""Endpoints for flashcard reviews and learner vocabulary progress."""
from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from hebrew_app.api import deps
from hebrew_app.db.models.user import User
from hebrew_app.schemas.progress import (
    BulkUpdateRequest,
    BulkUpdateResponse,
    CardResultRequest,
    CardResultResponse,
    ProgressOverview,
    ProgressUpdateRequest,
    ProgressUpdateResponse,
    VocabSummary,
    WordProgressRead,
)
from hebrew_app.schemas.stats import DailyGoalRead, XPRead
from hebrew_app.services.progress import ProgressService
from hebrew_app.services.stats import StatsService

router = APIRouter(prefix="/vocab", tags=["progress"])


@router.post("/card-result", response_model=CardResultResponse)
def submit_card_result(
    payload: CardResultRequest,
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_user),
) -> CardResultResponse:
    """Grade one card and return everything the answer changed."""

    outcome = ProgressService(db).record_card_result(
        current_user.id,
        word_id=payload.word_id,
        correct=payload.correct,
        review_id=payload.review_id,
    )
    return CardResultResponse(
        replayed=outcome.replayed,
        word_progress=WordProgressRead.model_validate(outcome.progress),
        stats=StatsService.to_read(outcome.stats),
        xp=XPRead.model_validate(outcome.xp) if outcome.xp else None,
        daily_goal=DailyGoalRead.model_validate(outcome.daily_goal),
        unlocked_achievements=outcome.unlocked,
    )


@router.post("/progress/update", response_model=ProgressUpdateResponse)
def update_progress(
    payload: ProgressUpdateRequest,
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_user),
) -> ProgressUpdateResponse:
    """Record a review without awarding XP or daily goal credit."""

    progress, stats = ProgressService(db).update_progress(
        current_user.id, word_id=payload.word_id, correct=payload.correct
    )
    return ProgressUpdateResponse(
        word_progress=WordProgressRead.model_validate(progress),
        stats=StatsService.to_read(stats),
    )


@router.post("/progress/bulk-update", response_model=BulkUpdateResponse)
def bulk_update_progress(
    payload: BulkUpdateRequest,
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_user),
) -> BulkUpdateResponse:
    updated = ProgressService(db).bulk_update(
        current_user.id, word_ids=payload.word_ids, action=payload.action
    )
    return BulkUpdateResponse(updated=updated, action=payload.action)


@router.get("/progress", response_model=ProgressOverview)
def read_progress(
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_user),
) -> ProgressOverview:
    stats, rows = ProgressService(db).overview(current_user.id)
    db.commit()
    return ProgressOverview(
        stats=StatsService.to_read(stats),
        word_progress={row.word_id: WordProgressRead.model_validate(row) for row in rows},
    )


@router.get("/stats", response_model=VocabSummary)
def read_summary(
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_user),
) -> VocabSummary:
    """Totals, percentages, level distribution and the hardest words."""

    return ProgressService(db).summary(current_user.id)
