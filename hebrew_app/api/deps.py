"""Shared API dependencies."""
from __future__ import annotations

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from pydantic import ValidationError
from sqlalchemy.orm import Session

from hebrew_app.config import settings
from hebrew_app.core.security import ACCESS_TOKEN, InvalidTokenError, decode_token
from hebrew_app.db.models.user import User
from hebrew_app.db.session import get_db
from hebrew_app.schemas import TokenPayload
from hebrew_app.services.users import UserNotFoundError, UserService
from hebrew_app.utils.exceptions import AuthenticationError, PermissionDeniedError

oauth2_scheme = OAuth2PasswordBearer(tokenUrl=f"{settings.API_PREFIX}/auth/login", auto_error=False)


def get_current_user(
    token: str | None = Depends(oauth2_scheme), db: Session = Depends(get_db)
) -> User:
    """Resolve the authenticated user from the Authorization header."""

    if not token:
        raise AuthenticationError("Not authenticated")

    try:
        payload = decode_token(token, expected_type=ACCESS_TOKEN)
        token_data = TokenPayload.model_validate(payload)
    except (InvalidTokenError, ValidationError) as exc:
        raise AuthenticationError("Could not validate credentials") from exc

    try:
        return UserService(db).get_active(token_data.sub)
    except UserNotFoundError as exc:
        raise AuthenticationError("Could not validate credentials") from exc


def get_current_admin(current_user: User = Depends(get_current_user)) -> User:
    """Allow only content administrators through."""

    if not current_user.is_admin:
        raise PermissionDeniedError("Administrator privileges required")
    return current_user


__all__ = ["get_current_admin", "get_current_user", "get_db", "oauth2_scheme"]
