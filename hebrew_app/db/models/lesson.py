"""Curriculum models: lessons, their steps, quiz questions and learner progress."""
import uuid

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from hebrew_app.db.base import Base
from hebrew_app.db.types import JSONPayload, StringList

LESSON_STATUSES = ("not_started", "in_progress", "completed")
STEP_TYPES = (
    "objective",
    "concept",
    "adjective-comparison",
    "scripture",
    "vocabulary",
    "quiz",
    "completion",
)
QUESTION_TYPES = ("multiple_choice", "fill_blank", "translation")


class Lesson(Base):
    """A weekly lesson within a language curriculum."""

    __tablename__ = "lessons"
    __table_args__ = (
        UniqueConstraint("language_id", "week_number"),
        CheckConstraint("difficulty_level BETWEEN 1 AND 5", name="difficulty_range"),
        CheckConstraint("min_quiz_score BETWEEN 0 AND 100", name="quiz_score_range"),
    )

    id = Column(String(100), primary_key=True)
    language_id = Column(String(20), nullable=False, default="hebrew", index=True)
    week_number = Column(Integer, nullable=False)
    month_number = Column(Integer, nullable=False)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    lesson_content = Column(Text, nullable=False, default="")
    topics = Column(StringList, nullable=False, default=list)
    vocabulary_set_ids = Column(StringList, nullable=False, default=list)
    order_index = Column(Integer, nullable=False)

    estimated_minutes = Column(Integer, nullable=False, default=15)
    difficulty_level = Column(Integer, nullable=False, default=3)
    requires_quiz_pass = Column(Boolean, nullable=False, default=True)
    min_quiz_score = Column(Integer, nullable=False, default=80)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    steps = relationship(
        "LessonStep",
        back_populates="lesson",
        cascade="all, delete-orphan",
        order_by="LessonStep.order_index",
    )
    quiz_questions = relationship(
        "QuizQuestion",
        back_populates="lesson",
        cascade="all, delete-orphan",
        order_by="QuizQuestion.order_index",
    )


class LessonStep(Base):
    """One screen of an interactive lesson; ``content`` shape follows ``step_type``."""

    __tablename__ = "lesson_steps"
    __table_args__ = (UniqueConstraint("lesson_id", "step_number"),)

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    lesson_id = Column(
        String(100), ForeignKey("lessons.id", ondelete="CASCADE"), nullable=False, index=True
    )
    step_number = Column(Integer, nullable=False)
    step_type = Column(String(30), nullable=False)
    content = Column(JSONPayload, nullable=False, default=dict)
    order_index = Column(Integer, nullable=False)

    lesson = relationship("Lesson", back_populates="steps")


class QuizQuestion(Base):
    """A graded question attached to a lesson."""

    __tablename__ = "quiz_questions"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    lesson_id = Column(
        String(100), ForeignKey("lessons.id", ondelete="CASCADE"), nullable=False, index=True
    )
    question_text = Column(Text, nullable=False)
    question_type = Column(String(30), nullable=False, default="multiple_choice")
    correct_answer = Column(Text, nullable=False)
    options = Column(JSONPayload, nullable=False, default=list)
    explanation = Column(Text)
    order_index = Column(Integer, nullable=False, default=0)

    lesson = relationship("Lesson", back_populates="quiz_questions")


class UserLessonProgress(Base):
    """Learner status for a lesson."""

    __tablename__ = "user_lesson_progress"
    __table_args__ = (UniqueConstraint("user_id", "lesson_id"),)

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(
        UUID(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    lesson_id = Column(
        String(100), ForeignKey("lessons.id", ondelete="CASCADE"), nullable=False
    )
    status = Column(String(20), nullable=False, default="not_started")
    started_at = Column(DateTime(timezone=True))
    completed_at = Column(DateTime(timezone=True))
    last_accessed_at = Column(DateTime(timezone=True))
    quiz_score = Column(Integer)
    time_spent_minutes = Column(Integer, nullable=False, default=0)
    attempts = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())


class UserQuizAttempt(Base):
    """A single graded answer submitted for a quiz question."""

    __tablename__ = "user_quiz_attempts"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(
        UUID(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    quiz_question_id = Column(
        UUID(as_uuid=True), ForeignKey("quiz_questions.id", ondelete="CASCADE"), nullable=False
    )
    lesson_id = Column(
        String(100), ForeignKey("lessons.id", ondelete="CASCADE"), nullable=False
    )
    selected_answer = Column(Text, nullable=False)
    is_correct = Column(Boolean, nullable=False)
    attempted_at = Column(DateTime(timezone=True), server_default=func.now())
