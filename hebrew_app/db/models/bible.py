"""Read-only Hebrew Bible reference tables."""
from sqlalchemy import Boolean, Column, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import relationship

from hebrew_app.db.base import Base


class BibleBook(Base):
    __tablename__ = "bible_books"

    id = Column(String(10), primary_key=True)
    name = Column(String(100), nullable=False)
    hebrew_name = Column(String(100), nullable=False)
    abbreviation = Column(String(10), nullable=False)
    chapter_count = Column(Integer, nullable=False)
    testament = Column(String(10), nullable=False, default="OT")
    order_index = Column(Integer, nullable=False)

    verses = relationship("BibleVerse", back_populates="book")


class BibleVerse(Base):
    __tablename__ = "bible_verses"
    __table_args__ = (UniqueConstraint("book_id", "chapter", "verse"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    book_id = Column(String(10), ForeignKey("bible_books.id", ondelete="CASCADE"), nullable=False)
    chapter = Column(Integer, nullable=False)
    verse = Column(Integer, nullable=False)
    hebrew_text = Column(Text, nullable=False)
    word_count = Column(Integer, nullable=False, default=0)

    book = relationship("BibleBook", back_populates="verses")
    words = relationship("BibleWord", back_populates="verse", order_by="BibleWord.position")


class BibleWord(Base):
    """A token of a verse with its Strong's lemma and OSHB morphology code."""

    __tablename__ = "bible_words"

    id = Column(Integer, primary_key=True, autoincrement=True)
    verse_id = Column(
        Integer, ForeignKey("bible_verses.id", ondelete="CASCADE"), nullable=False, index=True
    )
    position = Column(Integer, nullable=False)
    hebrew = Column(String(100), nullable=False)
    lemma = Column(String(20), index=True)
    lemma_prefix = Column(String(20))
    morph = Column(String(50))
    is_prefix_compound = Column(Boolean, nullable=False, default=False)

    verse = relationship("BibleVerse", back_populates="words")


class StrongsEntry(Base):
    """Strong's Hebrew dictionary entry keyed by number (``H7225``)."""

    __tablename__ = "strongs_hebrew"

    number = Column(String(20), primary_key=True)
    lemma = Column(String(100), nullable=False)
    transliteration = Column(String(100))
    pronunciation = Column(String(100))
    short_def = Column(Text)
    strongs_def = Column(Text)
    kjv_def = Column(Text)
