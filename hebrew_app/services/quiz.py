"""Server-side quiz grading and cross-lesson review questions."""
from __future__ import annotations

import math
import uuid
from datetime import datetime, timezone
from typing import Dict, List, Sequence

from loguru import logger
from sqlalchemy import select
from sqlalchemy.orm import Session

from hebrew_app.core.gamification import QUIZ_XP_PER_QUESTION, quiz_reward
from hebrew_app.db.models.lesson import Lesson, QuizQuestion, UserLessonProgress, UserQuizAttempt
from hebrew_app.schemas.lesson import (
    QuizBreakdown,
    QuizResult,
    QuizSubmission,
    ReviewLesson,
    ReviewQuestion,
    ReviewQuestionsResponse,
)
from hebrew_app.services.lessons import LessonService
from hebrew_app.services.stats import StatsService
from hebrew_app.utils.exceptions import ValidationError


def normalize_answer(answer: str) -> str:
    return " ".join(answer.split()).casefold()


def score_percentage(correct: int, total: int) -> int:
    if total <= 0:
        return 0
    return math.floor(correct / total * 100 + 0.5)


class QuizService:
    def __init__(self, db: Session):
        self.db = db

    def submit(
        self, user_id: uuid.UUID, submission: QuizSubmission, *, now: datetime | None = None
    ) -> QuizResult:
        """Grade a quiz attempt, record it and credit the learner's XP.

        Answers are compared with the stored correct answer ignoring case and
        surrounding whitespace. Once a lesson is completed it stays completed.
        """

        now = now or datetime.now(timezone.utc)
        lesson = LessonService(self.db).get_lesson(submission.lesson_id)
        questions: Dict[uuid.UUID, QuizQuestion] = {
            question.id: question
            for question in self.db.scalars(
                select(QuizQuestion).where(QuizQuestion.lesson_id == lesson.id)
            )
        }

        seen: set[uuid.UUID] = set()
        for answer in submission.attempts:
            if answer.question_id not in questions:
                raise ValidationError(
                    f"Question {answer.question_id} does not belong to lesson '{lesson.id}'"
                )
            if answer.question_id in seen:
                raise ValidationError(f"Question {answer.question_id} answered more than once")
            seen.add(answer.question_id)

        results: Dict[str, bool] = {}
        for answer in submission.attempts:
            question = questions[answer.question_id]
            is_correct = normalize_answer(answer.selected_answer) == normalize_answer(
                question.correct_answer
            )
            results[str(question.id)] = is_correct
            self.db.add(
                UserQuizAttempt(
                    user_id=user_id,
                    quiz_question_id=question.id,
                    lesson_id=lesson.id,
                    selected_answer=answer.selected_answer,
                    is_correct=is_correct,
                    attempted_at=now,
                )
            )

        correct = sum(results.values())
        total = len(submission.attempts)
        score = score_percentage(correct, total)
        reward = quiz_reward(correct_answers=correct, score=score, min_score=lesson.min_quiz_score)

        progress = self.db.scalar(
            select(UserLessonProgress).where(
                UserLessonProgress.user_id == user_id,
                UserLessonProgress.lesson_id == lesson.id,
            )
        )
        if progress is None:
            progress = UserLessonProgress(
                user_id=user_id, lesson_id=lesson.id, status="in_progress", attempts=0
            )
            self.db.add(progress)
            self.db.flush()
        progress.attempts = UserLessonProgress.attempts + 1
        progress.quiz_score = score
        progress.last_accessed_at = now
        if progress.started_at is None:
            progress.started_at = now
        if reward.passed or progress.status == "completed":
            progress.status = "completed"
            if progress.completed_at is None:
                progress.completed_at = now
        else:
            progress.status = "in_progress"

        if reward.total_xp > 0:
            stats_service = StatsService(self.db)
            stats_service.add_xp(stats_service.lock(user_id), reward.total_xp)

        self.db.flush()
        self.db.refresh(progress)
        self.db.commit()
        logger.info(
            f"User {user_id} scored {score}% on lesson {lesson.id} "
            f"({'passed' if reward.passed else 'not passed'}, {reward.total_xp} XP)"
        )
        return QuizResult(
            passed=reward.passed,
            score=score,
            attempts=progress.attempts,
            min_score=lesson.min_quiz_score,
            xp_awarded=reward.total_xp,
            breakdown=QuizBreakdown(
                correct_answers=correct,
                total_questions=total,
                xp_per_question=QUIZ_XP_PER_QUESTION,
                bonus_xp=reward.bonus_xp,
            ),
            results=results,
        )

    def review_questions(self, lesson_ids: Sequence[str]) -> ReviewQuestionsResponse:
        """Questions of several lessons ordered by week, for mixed review."""

        lesson_ids = [lesson_id for lesson_id in lesson_ids if lesson_id]
        if not lesson_ids:
            raise ValidationError("At least one lesson ID is required")

        rows = self.db.execute(
            select(QuizQuestion, Lesson)
            .join(Lesson, Lesson.id == QuizQuestion.lesson_id)
            .where(QuizQuestion.lesson_id.in_(lesson_ids))
            .order_by(Lesson.week_number, QuizQuestion.order_index)
        ).all()
        questions: List[ReviewQuestion] = [
            ReviewQuestion(
                id=question.id,
                lesson_id=question.lesson_id,
                question_text=question.question_text,
                question_type=question.question_type,
                correct_answer=question.correct_answer,
                options=question.options or [],
                explanation=question.explanation,
                order_index=question.order_index,
                lesson_title=lesson.title,
                week_number=lesson.week_number,
            )
            for question, lesson in rows
        ]
        lessons = [
            ReviewLesson(id=lesson.id, title=lesson.title, week_number=lesson.week_number)
            for lesson in self.db.scalars(
                select(Lesson).where(Lesson.id.in_(lesson_ids)).order_by(Lesson.week_number)
            )
        ]
        return ReviewQuestionsResponse(
            questions=questions, lessons=lessons, total_questions=len(questions)
        )


__all__ = ["QuizService", "normalize_answer", "score_percentage"]
