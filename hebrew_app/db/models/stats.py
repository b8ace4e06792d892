"""Per-user gamification counters."""
import uuid

from sqlalchemy import Column, Date, DateTime, ForeignKey, Integer
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from hebrew_app.db.base import Base


class UserStats(Base):
    """Singleton row per learner holding XP, level, streak and daily goal.

    Counters are only ever changed with ``UPDATE ... SET col = col + n`` while
    the row is locked by the request that owns it.
    """

    __tablename__ = "user_stats"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    )

    last_studied = Column(DateTime(timezone=True))
    total_reviews = Column(Integer, nullable=False, default=0)
    words_learned = Column(Integer, nullable=False, default=0)
    words_mastered = Column(Integer, nullable=False, default=0)

    streak = Column(Integer, nullable=False, default=0)
    longest_streak = Column(Integer, nullable=False, default=0)
    correct_run = Column(Integer, nullable=False, default=0)

    xp = Column(Integer, nullable=False, default=0)
    level = Column(Integer, nullable=False, default=1)

    daily_goal = Column(Integer, nullable=False, default=20)
    cards_today = Column(Integer, nullable=False, default=0)
    last_goal_reset = Column(Date)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    user = relationship("User", back_populates="stats")
