"""Field types shared by the response schemas."""
from __future__ import annotations

from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator

from hebrew_app.core.gamification import ensure_aware

# SQLite hands timestamps back naive; responses always carry UTC.
UTCDateTime = Annotated[datetime, AfterValidator(ensure_aware)]

__all__ = ["UTCDateTime"]
