"""API endpoint modules."""

from hebrew_app.api.endpoints import (
    achievements,
    auth,
    bible,
    lessons,
    progress,
    quiz,
    sessions,
    stats,
    users,
    vocab_sets,
)

__all__ = [
    "achievements",
    "auth",
    "bible",
    "lessons",
    "progress",
    "quiz",
    "sessions",
    "stats",
    "users",
    "vocab_sets",
]
