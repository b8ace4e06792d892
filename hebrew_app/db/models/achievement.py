"""Achievement catalog and per-user unlock state."""
import uuid

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from hebrew_app.db.base import Base


class Achievement(Base):
    """Static achievement definition identified by a slug such as ``streak-7``."""

    __tablename__ = "achievements"

    id = Column(String(50), primary_key=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=False, default="")
    icon = Column(String(16), nullable=False, default="")
    xp_reward = Column(Integer, nullable=False, default=0)
    metric = Column(String(30), nullable=False)
    target = Column(Integer, nullable=False, default=1)

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    progress_entries = relationship("AchievementProgress", back_populates="achievement")


class AchievementProgress(Base):
    """Unlock flag of one achievement for one learner."""

    __tablename__ = "achievement_progress"
    __table_args__ = (UniqueConstraint("user_id", "achievement_id"),)

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(
        UUID(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    achievement_id = Column(
        String(50), ForeignKey("achievements.id", ondelete="CASCADE"), nullable=False
    )

    progress = Column(Integer, nullable=False, default=0)
    unlocked = Column(Boolean, nullable=False, default=False)
    unlocked_at = Column(DateTime(timezone=True))

    achievement = relationship("Achievement", back_populates="progress_entries")
