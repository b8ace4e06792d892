"""Pydantic schemas package."""

from hebrew_app.schemas.auth import Token, TokenPayload
from hebrew_app.schemas.user import UserCreate, UserLogin, UserRead

__all__ = [
    "Token",
    "TokenPayload",
    "UserCreate",
    "UserLogin",
    "UserRead",
]
