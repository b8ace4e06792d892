"""Top-level API router."""
from fastapi import APIRouter

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


api_router = APIRouter()
api_router.include_router(auth.router)
api_router.include_router(users.router)
api_router.include_router(vocab_sets.router)
api_router.include_router(progress.router)
api_router.include_router(stats.router)
api_router.include_router(achievements.router)
api_router.include_router(sessions.router)
api_router.include_router(sessions.timer_router)
api_router.include_router(lessons.router)
api_router.include_router(quiz.router)
api_router.include_router(quiz.review_router)
api_router.include_router(bible.router)
