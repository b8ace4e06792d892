"""Vocabulary set browsing, activation, authoring and the study queue."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from hebrew_app.api import deps
from hebrew_app.db.models.user import User
from hebrew_app.schemas.vocabulary import (
    ActivateSetResponse,
    ActiveSetsResponse,
    ReorganizeRequest,
    ReorganizeResponse,
    SeedCategoriesResponse,
    StudyQueueResponse,
    ToggleActiveRequest,
    ToggleActiveResponse,
    VocabSetCreate,
    VocabSetCreateResponse,
    VocabSetListResponse,
    VocabSetRead,
)
from hebrew_app.services.progress import ProgressService
from hebrew_app.services.vocabulary import VocabularyService

router = APIRouter(prefix="/vocab", tags=["vocabulary"])


@router.get("/sets", response_model=VocabSetListResponse)
def list_sets(
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_user),
) -> VocabSetListResponse:
    """Return every set, newest first, with the caller's progress merged into each card."""

    return VocabSetListResponse(sets=VocabularyService(db).list_sets(current_user.id))


@router.get("/sets/active", response_model=ActiveSetsResponse)
def list_active_sets(
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_user),
) -> ActiveSetsResponse:
    return VocabularyService(db).active_sets(current_user.id)


@router.post("/sets/toggle-active", response_model=ToggleActiveResponse)
def toggle_active_set(
    payload: ToggleActiveRequest,
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_user),
) -> ToggleActiveResponse:
    """Add the set to, or remove it from, the caller's active sets."""

    is_active = VocabularyService(db).toggle_active(current_user.id, payload.set_id)
    return ToggleActiveResponse(set_id=payload.set_id, is_active=is_active)


@router.get("/sets/{set_id}", response_model=VocabSetRead)
def read_set(
    set_id: str,
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_user),
) -> VocabSetRead:
    return VocabularyService(db).read_set(current_user.id, set_id)


@router.post("/sets/{set_id}/activate", response_model=ActivateSetResponse)
def activate_set(
    set_id: str,
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_user),
) -> ActivateSetResponse:
    """Make ``set_id`` the caller's only active set."""

    return ActivateSetResponse(active_set_id=VocabularyService(db).activate_only(current_user.id, set_id))


@router.post("/create", response_model=VocabSetCreateResponse, status_code=status.HTTP_201_CREATED)
def create_set(
    payload: VocabSetCreate,
    db: Session = Depends(deps.get_db),
    _: User = Depends(deps.get_current_admin),
) -> VocabSetCreateResponse:
    return VocabularyService(db).create_set(payload)


@router.post("/reorganize", response_model=ReorganizeResponse)
def reorganize_sets(
    payload: ReorganizeRequest | None = None,
    db: Session = Depends(deps.get_db),
    _: User = Depends(deps.get_current_admin),
) -> ReorganizeResponse:
    """Regroup vocabulary words by part of speech, frequency and meaning."""

    results = VocabularyService(db).reorganize(payload.set_id if payload else None)
    return ReorganizeResponse(message=f"Reorganized {len(results)} vocab set(s)", sets=results)


@router.post("/seed-categories", response_model=SeedCategoriesResponse)
def seed_categories(
    db: Session = Depends(deps.get_db),
    _: User = Depends(deps.get_current_admin),
) -> SeedCategoriesResponse:
    return VocabularyService(db).seed_foundations()


@router.get("/queue", response_model=StudyQueueResponse)
def get_study_queue(
    *,
    max_review: int = Query(10, ge=0, le=100, description="Maximum due cards to return"),
    max_new: int = Query(5, ge=0, le=100, description="Maximum unseen cards to return"),
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_user),
) -> StudyQueueResponse:
    """Due reviews first, then new cards, from the caller's active sets."""

    return ProgressService(db).study_queue(current_user.id, max_review=max_review, max_new=max_new)
