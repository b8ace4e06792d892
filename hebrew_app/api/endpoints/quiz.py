"""Quiz submission and cross-lesson review endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from hebrew_app.api import deps
from hebrew_app.db.models.user import User
from hebrew_app.schemas.lesson import QuizResult, QuizSubmission, ReviewQuestionsResponse
from hebrew_app.services.quiz import QuizService

router = APIRouter(prefix="/quiz", tags=["quiz"])
review_router = APIRouter(prefix="/review", tags=["quiz"])


@router.post("/submit", response_model=QuizResult)
def submit_quiz(
    payload: QuizSubmission,
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_user),
) -> QuizResult:
    """Grade the answers server-side and record the attempt."""

    return QuizService(db).submit(current_user.id, payload)


@review_router.get("/questions", response_model=ReviewQuestionsResponse)
def list_review_questions(
    *,
    lesson_ids: str = Query(..., description="Comma-separated lesson ids"),
    db: Session = Depends(deps.get_db),
    _: User = Depends(deps.get_current_user),
) -> ReviewQuestionsResponse:
    ids = [lesson_id.strip() for lesson_id in lesson_ids.split(",")]
    return QuizService(db).review_questions(ids)
