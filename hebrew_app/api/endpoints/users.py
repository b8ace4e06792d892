"""User profile endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends

from hebrew_app.api import deps
from hebrew_app.db.models.user import User
from hebrew_app.schemas import UserRead

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/me", response_model=UserRead)
def read_current_user(current_user: User = Depends(deps.get_current_user)) -> UserRead:
    """Return the authenticated user profile."""

    return UserRead.model_validate(current_user)
