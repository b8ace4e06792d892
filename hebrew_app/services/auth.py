"""Authentication service layer."""
from __future__ import annotations

from loguru import logger
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from hebrew_app.config import settings
from hebrew_app.core.security import (
    create_access_token,
    create_refresh_token,
    get_password_hash,
    verify_password,
)
from hebrew_app.db.models.user import User
from hebrew_app.schemas import Token, UserCreate
from hebrew_app.services.stats import StatsService
from hebrew_app.utils.exceptions import AuthenticationError, ValidationError


class EmailAlreadyExistsError(ValidationError):
    """Raised when attempting to register with an email that already exists."""


class InvalidCredentialsError(AuthenticationError):
    """Raised when authentication credentials are invalid."""


class AuthService:
    """Registers learners and issues their tokens."""

    def __init__(self, db: Session):
        self.db = db

    def _find_by_email(self, email: str) -> User | None:
        return self.db.scalar(select(User).where(func.lower(User.email) == email.lower()))

    def register_user(self, payload: UserCreate) -> User:
        """Create the account and its stats row in one transaction."""

        if self._find_by_email(payload.email):
            raise EmailAlreadyExistsError("A user with this email already exists.")

        admin_emails = {email.lower() for email in settings.ADMIN_EMAILS}
        user = User(
            email=payload.email,
            hashed_password=get_password_hash(payload.password),
            full_name=payload.full_name,
            is_admin=payload.email.lower() in admin_emails,
        )
        self.db.add(user)
        try:
            self.db.flush()
            StatsService(self.db).get_or_create(user.id)
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            raise EmailAlreadyExistsError("A user with this email already exists.") from exc
        self.db.refresh(user)
        logger.info(f"Registered learner {user.id} (admin={user.is_admin})")
        return user

    def authenticate_user(self, email: str, password: str) -> User:
        user = self._find_by_email(email)
        if not user or not user.is_active or not verify_password(password, user.hashed_password):
            raise InvalidCredentialsError("Incorrect email or password")
        return user

    def create_tokens(self, user: User) -> Token:
        subject = str(user.id)
        return Token(
            access_token=create_access_token(subject),
            refresh_token=create_refresh_token(subject),
            expires_in=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        )
