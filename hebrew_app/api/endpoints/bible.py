"""Bible reader endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from hebrew_app.api import deps
from hebrew_app.db.models.user import User
from hebrew_app.schemas.bible import BibleBooksResponse, BibleChapterResponse
from hebrew_app.services.bible import BibleService

router = APIRouter(prefix="/bible", tags=["bible"])


@router.get("/books", response_model=BibleBooksResponse)
def list_books(
    db: Session = Depends(deps.get_db),
    _: User = Depends(deps.get_current_user),
) -> BibleBooksResponse:
    return BibleService(db).list_books()


@router.get("/{book_id}/{chapter}", response_model=BibleChapterResponse)
def read_chapter(
    book_id: str,
    chapter: str,
    db: Session = Depends(deps.get_db),
    _: User = Depends(deps.get_current_user),
) -> BibleChapterResponse:
    """Verses of a chapter with Strong's glosses and decoded morphology per word."""

    return BibleService(db).chapter(book_id, chapter)
