"""Curriculum lessons, their interactive steps and learner lesson progress."""
from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Dict, List, Optional

from loguru import logger
from pydantic import TypeAdapter
from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from hebrew_app.db.models.lesson import Lesson, LessonStep, QuizQuestion, UserLessonProgress
from hebrew_app.db.models.vocabulary import VocabSet
from hebrew_app.schemas.lesson import (
    LessonCreate,
    LessonCreateResponse,
    LessonProgressRead,
    LessonRead,
    LessonSetSummary,
    LessonStatus,
    LessonStepSchema,
    LessonStepsResponse,
    LessonSummary,
    QuizQuestionRead,
)
from hebrew_app.utils.exceptions import NotFoundError

_step_adapter = TypeAdapter(LessonStepSchema)


class LessonNotFoundError(NotFoundError):
    def __init__(self, lesson_id: str) -> None:
        super().__init__(f"Lesson '{lesson_id}' not found")


class LessonService:
    """Read lessons and track how far a learner has got through them."""

    def __init__(self, db: Session):
        self.db = db

    def get_lesson(self, lesson_id: str) -> Lesson:
        lesson = self.db.get(Lesson, lesson_id)
        if lesson is None:
            raise LessonNotFoundError(lesson_id)
        return lesson

    def _get_progress(self, user_id: uuid.UUID, lesson_id: str) -> Optional[UserLessonProgress]:
        return self.db.scalar(
            select(UserLessonProgress).where(
                UserLessonProgress.user_id == user_id,
                UserLessonProgress.lesson_id == lesson_id,
            )
        )

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------
    def list_lessons(self, user_id: uuid.UUID, language: str = "hebrew") -> List[LessonSummary]:
        """Lessons of a language in curriculum order with the caller's status."""

        lessons = list(
            self.db.scalars(
                select(Lesson)
                .where(Lesson.language_id == language)
                .order_by(Lesson.order_index, Lesson.week_number)
            )
        )
        if not lessons:
            return []

        progress_by_lesson: Dict[str, UserLessonProgress] = {
            row.lesson_id: row
            for row in self.db.scalars(
                select(UserLessonProgress).where(
                    UserLessonProgress.user_id == user_id,
                    UserLessonProgress.lesson_id.in_([lesson.id for lesson in lessons]),
                )
            )
        }
        set_ids = {set_id for lesson in lessons for set_id in lesson.vocabulary_set_ids}
        sets = {
            vocab_set.id: vocab_set
            for vocab_set in self.db.scalars(select(VocabSet).where(VocabSet.id.in_(set_ids)))
        } if set_ids else {}

        summaries = []
        for lesson in lessons:
            progress = progress_by_lesson.get(lesson.id)
            summary = LessonSummary.model_validate(lesson)
            summary.vocabulary_sets = [
                LessonSetSummary(id=sets[set_id].id, title=sets[set_id].title, total_words=sets[set_id].total_words)
                for set_id in lesson.vocabulary_set_ids
                if set_id in sets
            ]
            if progress is not None:
                summary.user_status = progress.status
                summary.started_at = progress.started_at
                summary.completed_at = progress.completed_at
                summary.last_accessed_at = progress.last_accessed_at
            summaries.append(summary)
        return summaries

    def read_lesson(
        self, user_id: uuid.UUID, lesson_id: str, *, now: datetime | None = None
    ) -> LessonRead:
        """Return a lesson, stamping ``last_accessed_at`` when the learner has progress."""

        lesson = self.get_lesson(lesson_id)
        progress = self._get_progress(user_id, lesson_id)
        if progress is not None:
            progress.last_accessed_at = now or datetime.now(timezone.utc)
            self.db.commit()
        return LessonRead.model_validate(lesson)

    def steps(self, lesson_id: str) -> LessonStepsResponse:
        lesson = self.get_lesson(lesson_id)
        steps = [
            _step_adapter.validate_python(
                {
                    "id": step.id,
                    "step_number": step.step_number,
                    "order_index": step.order_index,
                    "step_type": step.step_type,
                    "content": step.content,
                }
            )
            for step in lesson.steps
        ]
        questions: List[QuizQuestionRead] = []
        if lesson.requires_quiz_pass:
            questions = [QuizQuestionRead.model_validate(q) for q in lesson.quiz_questions]
        return LessonStepsResponse(
            lesson=LessonRead.model_validate(lesson),
            steps=steps,
            quiz_questions=questions,
            total_steps=len(steps),
        )

    # ------------------------------------------------------------------
    # Progress
    # ------------------------------------------------------------------
    def get_progress(self, user_id: uuid.UUID, lesson_id: str) -> LessonProgressRead:
        self.get_lesson(lesson_id)
        progress = self._get_progress(user_id, lesson_id)
        if progress is None:
            return LessonProgressRead(lesson_id=lesson_id)
        return LessonProgressRead.model_validate(progress)

    def update_progress(
        self,
        user_id: uuid.UUID,
        lesson_id: str,
        status: LessonStatus,
        *,
        now: datetime | None = None,
    ) -> LessonProgressRead:
        """Move the learner's lesson status.

        ``started_at`` is stamped by the first move away from ``not_started``
        and ``completed_at`` by the move to ``completed``.
        """

        self.get_lesson(lesson_id)
        now = now or datetime.now(timezone.utc)
        progress = self._get_progress(user_id, lesson_id)
        if progress is None:
            progress = UserLessonProgress(user_id=user_id, lesson_id=lesson_id, attempts=0)
            self.db.add(progress)

        progress.status = status
        progress.last_accessed_at = now
        if status != "not_started" and progress.started_at is None:
            progress.started_at = now
        if status == "completed" and progress.completed_at is None:
            progress.completed_at = now
        self.db.commit()
        logger.info(f"User {user_id} set lesson {lesson_id} to {status}")
        return LessonProgressRead.model_validate(progress)

    # ------------------------------------------------------------------
    # Authoring
    # ------------------------------------------------------------------
    def create_or_replace(self, payload: LessonCreate) -> LessonCreateResponse:
        """Upsert a lesson; supplied steps or questions replace the stored ones."""

        lesson = self.db.get(Lesson, payload.id)
        created = lesson is None
        if created:
            lesson = Lesson(id=payload.id)
            self.db.add(lesson)

        fields = payload.model_dump(exclude={"id", "steps", "quiz_questions"})
        for name, value in fields.items():
            setattr(lesson, name, value)
        self.db.flush()

        if payload.steps is not None:
            self.db.execute(delete(LessonStep).where(LessonStep.lesson_id == lesson.id))
            for step in payload.steps:
                self.db.add(
                    LessonStep(
                        lesson_id=lesson.id,
                        step_number=step.step_number,
                        step_type=step.step_type,
                        content=step.content.model_dump(mode="json"),
                        order_index=step.order_index if step.order_index is not None else step.step_number,
                    )
                )
        if payload.quiz_questions is not None:
            self.db.execute(delete(QuizQuestion).where(QuizQuestion.lesson_id == lesson.id))
            for question in payload.quiz_questions:
                self.db.add(QuizQuestion(lesson_id=lesson.id, **question.model_dump()))

        self.db.commit()
        self.db.refresh(lesson)
        step_count = len(lesson.steps)
        question_count = len(lesson.quiz_questions)
        logger.info(
            f"{'Created' if created else 'Updated'} lesson {lesson.id} "
            f"with {step_count} steps and {question_count} quiz questions"
        )
        return LessonCreateResponse(
            lesson=LessonRead.model_validate(lesson),
            steps=step_count,
            quiz_questions=question_count,
        )


__all__ = ["LessonNotFoundError", "LessonService"]
