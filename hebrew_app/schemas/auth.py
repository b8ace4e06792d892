"""Token schemas for learner login."""
from __future__ import annotations

import uuid
from typing import Literal

from pydantic import BaseModel, Field

from hebrew_app.schemas.common import UTCDateTime

TokenType = Literal["access", "refresh"]


class Token(BaseModel):
    """Access and refresh tokens issued after a successful login."""

    access_token: str
    refresh_token: str
    token_type: str = "bearer"
    expires_in: int = Field(description="Access token lifetime in seconds")


class TokenPayload(BaseModel):
    sub: uuid.UUID
    exp: UTCDateTime
    type: TokenType
