"""Read-only Bible reader backed by the imported OSHB text and Strong's lexicon."""
from __future__ import annotations

from collections import defaultdict
from typing import List

from sqlalchemy import select
from sqlalchemy.orm import Session

from hebrew_app.core.morphology import decode_morphology
from hebrew_app.db.models.bible import BibleBook, BibleVerse, BibleWord, StrongsEntry
from hebrew_app.schemas.bible import (
    BibleBookRead,
    BibleBooksResponse,
    BibleChapterResponse,
    BibleVerseRead,
    BibleWordRead,
    ChapterNavigation,
)
from hebrew_app.utils.cache import BIBLE_NAMESPACE, build_cache_key, cache_backend
from hebrew_app.utils.exceptions import NotFoundError, ValidationError


def parse_chapter(chapter: str | int) -> int:
    """Return the chapter as a positive integer or raise ``ValidationError``."""

    try:
        number = int(str(chapter).strip())
    except ValueError:
        raise ValidationError("Invalid chapter number") from None
    if number < 1:
        raise ValidationError("Invalid chapter number")
    return number


class BibleService:
    def __init__(self, db: Session):
        self.db = db

    def list_books(self) -> BibleBooksResponse:
        def load() -> dict:
            books = self.db.scalars(select(BibleBook).order_by(BibleBook.order_index))
            return BibleBooksResponse(
                books=[BibleBookRead.model_validate(book) for book in books]
            ).model_dump(mode="json")

        return BibleBooksResponse.model_validate(
            cache_backend.get_or_set(BIBLE_NAMESPACE, "books", load)
        )

    def chapter(self, book_id: str, chapter: str | int) -> BibleChapterResponse:
        """Verses of one chapter with each word's Strong's entry and decoded morphology."""

        number = parse_chapter(chapter)
        key = build_cache_key(book=book_id, chapter=number)
        payload = cache_backend.get_or_set(
            BIBLE_NAMESPACE, key, lambda: self._load_chapter(book_id, number)
        )
        return BibleChapterResponse.model_validate(payload)

    def _load_chapter(self, book_id: str, number: int) -> dict:
        book = self.db.get(BibleBook, book_id)
        if book is None:
            raise NotFoundError("Book not found")
        if number > book.chapter_count:
            raise NotFoundError(
                f"Chapter {number} not found. {book.name} has {book.chapter_count} chapters."
            )

        verses = list(
            self.db.scalars(
                select(BibleVerse)
                .where(BibleVerse.book_id == book_id, BibleVerse.chapter == number)
                .order_by(BibleVerse.verse)
            )
        )
        if not verses:
            raise NotFoundError("No verses found for this chapter")

        words_by_verse: dict[int, List[BibleWordRead]] = defaultdict(list)
        rows = self.db.execute(
            select(BibleWord, StrongsEntry)
            .outerjoin(StrongsEntry, StrongsEntry.number == BibleWord.lemma)
            .where(BibleWord.verse_id.in_([verse.id for verse in verses]))
            .order_by(BibleWord.verse_id, BibleWord.position)
        )
        for word, entry in rows:
            words_by_verse[word.verse_id].append(
                BibleWordRead(
                    position=word.position,
                    hebrew=word.hebrew,
                    lemma=word.lemma,
                    lemma_prefix=word.lemma_prefix,
                    morph=word.morph,
                    morph_description=decode_morphology(word.morph),
                    is_prefix_compound=word.is_prefix_compound,
                    gloss=(entry.short_def or None) if entry else None,
                    transliteration=(entry.transliteration or None) if entry else None,
                    pronunciation=(entry.pronunciation or None) if entry else None,
                    full_def=(entry.strongs_def or None) if entry else None,
                    strongs_lemma=entry.lemma if entry else None,
                )
            )

        response = BibleChapterResponse(
            book=BibleBookRead.model_validate(book),
            chapter=number,
            verses=[
                BibleVerseRead(
                    verse=verse.verse,
                    hebrew_text=verse.hebrew_text,
                    words=words_by_verse.get(verse.id, []),
                )
                for verse in verses
            ],
            navigation=ChapterNavigation(
                prev_chapter=number - 1 if number > 1 else None,
                next_chapter=number + 1 if number < book.chapter_count else None,
                total_chapters=book.chapter_count,
            ),
        )
        return response.model_dump(mode="json")


__all__ = ["BibleService", "parse_chapter"]
