"""Service layer for user lookups."""
from __future__ import annotations

import uuid

from sqlalchemy.orm import Session

from hebrew_app.db.models.user import User
from hebrew_app.utils.exceptions import NotFoundError


class UserNotFoundError(NotFoundError):
    """Raised when a user lookup fails."""


class UserService:
    def __init__(self, db: Session):
        self.db = db

    def get_active(self, user_id: uuid.UUID) -> User:
        """Return an active user by identifier or raise ``UserNotFoundError``."""

        user = self.db.get(User, user_id)
        if not user or not user.is_active:
            raise UserNotFoundError("User not found")
        return user
