"""Authentication API endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from hebrew_app.api.deps import get_db
from hebrew_app.schemas import Token, UserCreate, UserLogin, UserRead
from hebrew_app.services.auth import AuthService


router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def register_user(payload: UserCreate, db: Session = Depends(get_db)) -> UserRead:
    """Register a new learner and return the created account."""

    return AuthService(db).register_user(payload)


@router.post("/login", response_model=Token)
def login(payload: UserLogin, db: Session = Depends(get_db)) -> Token:
    """Authenticate a learner and return JWT tokens."""

    service = AuthService(db)
    user = service.authenticate_user(payload.email, payload.password)
    return service.create_tokens(user)
