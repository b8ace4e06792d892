"""Pydantic models for learner accounts."""
from __future__ import annotations

import uuid
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from hebrew_app.schemas.common import UTCDateTime


class UserCreate(BaseModel):
    """Registration input."""

    email: EmailStr
    password: str = Field(min_length=8, max_length=128)
    full_name: Optional[str] = Field(default=None, max_length=255)


class UserLogin(BaseModel):
    email: EmailStr
    password: str


class UserRead(BaseModel):
    """Account returned after registration or from ``/users/me``."""

    id: uuid.UUID
    email: EmailStr
    full_name: Optional[str] = None
    is_active: bool
    is_admin: bool
    created_at: Optional[UTCDateTime] = None

    model_config = ConfigDict(from_attributes=True)
