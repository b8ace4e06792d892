"""Schemas for the read-only Bible reader."""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class BibleBookRead(BaseModel):
    id: str
    name: str
    hebrew_name: str
    abbreviation: str
    chapter_count: int
    testament: str
    order_index: int

    model_config = ConfigDict(from_attributes=True)


class BibleBooksResponse(BaseModel):
    books: list[BibleBookRead] = Field(default_factory=list)


class BibleWordRead(BaseModel):
    """A verse token joined with its Strong's entry and decoded morphology."""

    position: int
    hebrew: str
    lemma: Optional[str] = None
    lemma_prefix: Optional[str] = None
    morph: Optional[str] = None
    morph_description: str = ""
    is_prefix_compound: bool = False
    gloss: Optional[str] = None
    transliteration: Optional[str] = None
    pronunciation: Optional[str] = None
    full_def: Optional[str] = None
    strongs_lemma: Optional[str] = None


class BibleVerseRead(BaseModel):
    verse: int
    hebrew_text: str
    words: list[BibleWordRead] = Field(default_factory=list)


class ChapterNavigation(BaseModel):
    prev_chapter: Optional[int] = None
    next_chapter: Optional[int] = None
    total_chapters: int


class BibleChapterResponse(BaseModel):
    book: BibleBookRead
    chapter: int
    verses: list[BibleVerseRead] = Field(default_factory=list)
    navigation: ChapterNavigation


__all__ = [
    "BibleBookRead",
    "BibleBooksResponse",
    "BibleChapterResponse",
    "BibleVerseRead",
    "BibleWordRead",
    "ChapterNavigation",
]
