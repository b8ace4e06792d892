"""Achievement API endpoints for tracking learner progress."""
from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from hebrew_app.api import deps
from hebrew_app.db.models.user import User
from hebrew_app.schemas.achievement import AchievementListResponse
from hebrew_app.services.achievement import AchievementService

router = APIRouter(prefix="/vocab", tags=["achievements"])


@router.get("/achievements", response_model=AchievementListResponse)
def list_achievements(
    *,
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_user),
) -> AchievementListResponse:
    """Return the catalog with the caller's progress, unlocked achievements first."""

    response = AchievementService(db).list_for_user(current_user.id)
    db.commit()
    return response
