"""Per-user spaced repetition progress."""
import uuid

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from hebrew_app.db.base import Base


class UserProgress(Base):
    """Scheduling state of one card for one learner."""

    __tablename__ = "user_progress"
    __table_args__ = (
        UniqueConstraint("user_id", "word_id"),
        CheckConstraint("level >= 0", name="level_non_negative"),
    )

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(
        UUID(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    word_id = Column(
        String(150), ForeignKey("vocab_words.id", ondelete="CASCADE"), nullable=False, index=True
    )

    level = Column(Integer, nullable=False, default=0)
    next_review = Column(DateTime(timezone=True), index=True)
    last_reviewed = Column(DateTime(timezone=True))
    review_count = Column(Integer, nullable=False, default=0)
    correct_count = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    word = relationship("VocabWord")


class ReviewLog(Base):
    """One graded card answer.

    ``review_id`` is the client's idempotency key; a repeated key for the same
    user replays the stored outcome instead of counting the answer again.
    """

    __tablename__ = "review_logs"
    __table_args__ = (UniqueConstraint("user_id", "review_id"),)

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(
        UUID(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    word_id = Column(
        String(150), ForeignKey("vocab_words.id", ondelete="CASCADE"), nullable=False
    )
    review_id = Column(String(100))
    correct = Column(Boolean, nullable=False)
    level_before = Column(Integer, nullable=False)
    level_after = Column(Integer, nullable=False)
    xp_gained = Column(Integer, nullable=False, default=0)
    reviewed_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
