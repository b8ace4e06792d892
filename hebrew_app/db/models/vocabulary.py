"""Vocabulary set and card models."""
from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from hebrew_app.db.base import Base
from hebrew_app.db.types import JSONPayload

CARD_TYPES = ("vocabulary", "alphabet", "syllable", "grammar")


class VocabSet(Base):
    """A named collection of cards studied together."""

    __tablename__ = "vocab_sets"

    id = Column(String(100), primary_key=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False, default="")
    total_words = Column(Integer, nullable=False, default=0)
    set_type = Column(String(20), nullable=False, default="vocabulary")

    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    words = relationship(
        "VocabWord",
        back_populates="vocab_set",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="VocabWord.id",
    )


class VocabWord(Base):
    """A single flashcard; ``extra_data`` is shaped by ``card_type``."""

    __tablename__ = "vocab_words"

    id = Column(String(150), primary_key=True)
    hebrew = Column(String(255), nullable=False)
    transliteration = Column(String(255), nullable=False)
    english = Column(String(255), nullable=False)
    type = Column(String(100), nullable=False)
    notes = Column(Text, nullable=False, default="")
    semantic_group = Column(String(100), nullable=False, default="")
    frequency = Column(Integer)

    set_id = Column(
        String(100), ForeignKey("vocab_sets.id", ondelete="CASCADE"), nullable=False, index=True
    )
    group_category = Column(String(100), nullable=False)
    group_subcategory = Column(String(150))

    card_type = Column(String(20), nullable=False, default="vocabulary")
    extra_data = Column(JSONPayload, nullable=False, default=dict)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    vocab_set = relationship("VocabSet", back_populates="words")


class UserActiveSet(Base):
    """Sets a learner has chosen to draw study cards from."""

    __tablename__ = "user_active_sets"
    __table_args__ = (UniqueConstraint("user_id", "set_id"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        UUID(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    set_id = Column(
        String(100), ForeignKey("vocab_sets.id", ondelete="CASCADE"), nullable=False
    )
    created_at = Column(DateTime(timezone=True), server_default=func.now())
