"""FastAPI application factory."""
from __future__ import annotations

import sys
from typing import List

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from hebrew_app.api.router import api_router
from hebrew_app.config import settings
from hebrew_app.utils.exceptions import (
    HebrewAppError,
    handle_app_error,
    handle_request_validation_error,
    handle_unexpected_error,
)


tags_metadata: List[dict[str, str]] = [
    {"name": "auth", "description": "Register learners and issue authentication tokens."},
    {"name": "vocabulary", "description": "Browse vocabulary sets and build the study queue."},
    {"name": "progress", "description": "Grade flashcards and report spaced repetition progress."},
    {"name": "lessons", "description": "Weekly lessons, their steps and learner status."},
    {"name": "bible", "description": "Read the Hebrew Bible with Strong's glosses."},
]


def configure_logging() -> None:
    logger.remove()
    logger.add(sys.stderr, level=settings.LOG_LEVEL.upper())


def create_app() -> FastAPI:
    """Create and configure the FastAPI application instance."""

    configure_logging()
    app = FastAPI(
        title=settings.PROJECT_NAME,
        description="Biblical Hebrew vocabulary, lessons and scripture reading.",
        version="0.1.0",
        openapi_tags=tags_metadata,
        docs_url=f"{settings.API_PREFIX}/docs",
        redoc_url=f"{settings.API_PREFIX}/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(HebrewAppError, handle_app_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)

    app.include_router(api_router, prefix=settings.API_PREFIX)
    return app


app = create_app()
