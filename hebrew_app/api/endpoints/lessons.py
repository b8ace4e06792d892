"""Lesson curriculum endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from hebrew_app.api import deps
from hebrew_app.db.models.user import User
from hebrew_app.schemas.lesson import (
    LessonCreate,
    LessonCreateResponse,
    LessonListResponse,
    LessonProgressRead,
    LessonProgressUpdate,
    LessonRead,
    LessonStepsResponse,
)
from hebrew_app.services.lessons import LessonService

router = APIRouter(prefix="/lessons", tags=["lessons"])


@router.get("", response_model=LessonListResponse)
def list_lessons(
    *,
    language: str = Query("hebrew", min_length=1, max_length=20),
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_user),
) -> LessonListResponse:
    """Return the curriculum in order with the caller's status for each lesson."""

    return LessonListResponse(lessons=LessonService(db).list_lessons(current_user.id, language))


@router.post("/create", response_model=LessonCreateResponse, status_code=status.HTTP_201_CREATED)
def create_lesson(
    payload: LessonCreate,
    db: Session = Depends(deps.get_db),
    _: User = Depends(deps.get_current_admin),
) -> LessonCreateResponse:
    """Create a lesson or replace an existing one with the same id."""

    return LessonService(db).create_or_replace(payload)


@router.get("/{lesson_id}", response_model=LessonRead)
def read_lesson(
    lesson_id: str,
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_user),
) -> LessonRead:
    return LessonService(db).read_lesson(current_user.id, lesson_id)


@router.get("/{lesson_id}/progress", response_model=LessonProgressRead)
def read_lesson_progress(
    lesson_id: str,
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_user),
) -> LessonProgressRead:
    return LessonService(db).get_progress(current_user.id, lesson_id)


@router.post("/{lesson_id}/progress", response_model=LessonProgressRead)
def update_lesson_progress(
    lesson_id: str,
    payload: LessonProgressUpdate,
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_user),
) -> LessonProgressRead:
    return LessonService(db).update_progress(current_user.id, lesson_id, payload.status)


@router.get("/{lesson_id}/steps", response_model=LessonStepsResponse)
def read_lesson_steps(
    lesson_id: str,
    db: Session = Depends(deps.get_db),
    _: User = Depends(deps.get_current_user),
) -> LessonStepsResponse:
    """Interactive steps in order; quiz questions only when the lesson is gated by a quiz."""

    return LessonService(db).steps(lesson_id)
