"""Schemas for lessons, lesson steps, quizzes and learner lesson progress.

Each lesson step carries a ``content`` payload whose shape is fixed by its
``step_type``; steps are modelled as a union discriminated on that field.
"""
from __future__ import annotations

import uuid
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from hebrew_app.schemas.common import UTCDateTime

LessonStatus = Literal["not_started", "in_progress", "completed"]
QuestionType = Literal["multiple_choice", "fill_blank", "translation"]


# ----------------------------------------------------------------------
# Step content payloads
# ----------------------------------------------------------------------
class ObjectiveContent(BaseModel):
    title: str
    objectives: list[str] = Field(default_factory=list)
    estimated_minutes: int = Field(default=15, ge=1)
    verse_reference: Optional[str] = None


class VisualAid(BaseModel):
    type: Literal["table", "diagram", "chart"]
    data: dict = Field(default_factory=dict)


class ConceptExample(BaseModel):
    hebrew: Optional[str] = None
    translation: Optional[str] = None
    highlight: Optional[str] = None
    explanation: str


class ExpandableTheory(BaseModel):
    title: str
    content: str


class ConceptContent(BaseModel):
    concept_name: str
    summary: str
    visual_aid: Optional[VisualAid] = None
    examples: list[ConceptExample] = Field(default_factory=list)
    expandable_theory: Optional[ExpandableTheory] = None
    practice_vocab_set_id: Optional[str] = None


class AdjectiveForm(BaseModel):
    hebrew: str
    transliteration: str
    pronunciation: str


class AdjectivePair(BaseModel):
    masculine: AdjectiveForm
    feminine: AdjectiveForm
    english: str
    notes: Optional[str] = None
    pattern_type: Optional[Literal["regular", "irregular"]] = None


class PatternExplanation(BaseModel):
    title: str
    rules: list[str] = Field(default_factory=list)
    exceptions: list[str] = Field(default_factory=list)


class AdjectiveComparisonContent(BaseModel):
    title: str
    description: str
    adjectives: list[AdjectivePair] = Field(default_factory=list)
    pattern_explanation: PatternExplanation
    practice_mode: Literal["view", "quiz"] = "view"


class ScriptureHighlight(BaseModel):
    word_index: int = Field(ge=0)
    color: str
    concept: str


class ScriptureContent(BaseModel):
    reference: str
    hebrew_text: str
    english_translation: str
    highlights: list[ScriptureHighlight] = Field(default_factory=list)
    comprehension_prompt: Optional[str] = None
    audio_url: Optional[str] = None


class VocabularyContent(BaseModel):
    vocabulary_set_id: str
    word_ids: list[str] = Field(default_factory=list)
    context_verse: Optional[str] = None
    instructions: str


class QuizContent(BaseModel):
    title: Optional[str] = None
    instructions: Optional[str] = None
    question_ids: list[uuid.UUID] = Field(default_factory=list)


class ReferenceLink(BaseModel):
    title: str
    url: str


class CompletionContent(BaseModel):
    celebration_message: str
    xp_awarded: int = Field(default=0, ge=0)
    achievements: list[str] = Field(default_factory=list)
    next_lesson_id: Optional[str] = None
    review_prompt: Optional[str] = None
    reference_links: list[ReferenceLink] = Field(default_factory=list)


# ----------------------------------------------------------------------
# Steps
# ----------------------------------------------------------------------
class StepBase(BaseModel):
    id: Optional[uuid.UUID] = None
    step_number: int = Field(ge=1)
    order_index: Optional[int] = None

    model_config = ConfigDict(from_attributes=True)


class ObjectiveStep(StepBase):
    step_type: Literal["objective"]
    content: ObjectiveContent


class ConceptStep(StepBase):
    step_type: Literal["concept"]
    content: ConceptContent


class AdjectiveComparisonStep(StepBase):
    step_type: Literal["adjective-comparison"]
    content: AdjectiveComparisonContent


class ScriptureStep(StepBase):
    step_type: Literal["scripture"]
    content: ScriptureContent


class VocabularyStep(StepBase):
    step_type: Literal["vocabulary"]
    content: VocabularyContent


class QuizStep(StepBase):
    step_type: Literal["quiz"]
    content: QuizContent = Field(default_factory=QuizContent)


class CompletionStep(StepBase):
    step_type: Literal["completion"]
    content: CompletionContent


LessonStepSchema = Annotated[
    Union[
        ObjectiveStep,
        ConceptStep,
        AdjectiveComparisonStep,
        ScriptureStep,
        VocabularyStep,
        QuizStep,
        CompletionStep,
    ],
    Field(discriminator="step_type"),
]


# ----------------------------------------------------------------------
# Lessons
# ----------------------------------------------------------------------
class QuizQuestionIn(BaseModel):
    question_text: str = Field(min_length=1)
    question_type: QuestionType = "multiple_choice"
    correct_answer: str = Field(min_length=1)
    options: list[str] = Field(default_factory=list)
    explanation: Optional[str] = None
    order_index: int = 0


class QuizQuestionRead(QuizQuestionIn):
    id: uuid.UUID
    lesson_id: str

    model_config = ConfigDict(from_attributes=True)


class LessonCreate(BaseModel):
    """Create or replace a lesson (admin)."""

    id: str = Field(min_length=1, max_length=100)
    language_id: str = "hebrew"
    week_number: int = Field(ge=1)
    month_number: int = Field(ge=1)
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    lesson_content: str = ""
    topics: list[str] = Field(default_factory=list)
    vocabulary_set_ids: list[str] = Field(default_factory=list)
    order_index: int
    estimated_minutes: int = Field(default=15, ge=1)
    difficulty_level: int = Field(default=3, ge=1, le=5)
    requires_quiz_pass: bool = True
    min_quiz_score: int = Field(default=80, ge=0, le=100)
    steps: Optional[list[LessonStepSchema]] = None
    quiz_questions: Optional[list[QuizQuestionIn]] = None


class LessonRead(BaseModel):
    id: str
    language_id: str
    week_number: int
    month_number: int
    title: str
    description: str
    lesson_content: str
    topics: list[str] = Field(default_factory=list)
    vocabulary_set_ids: list[str] = Field(default_factory=list)
    order_index: int
    estimated_minutes: int
    difficulty_level: int
    requires_quiz_pass: bool
    min_quiz_score: int

    model_config = ConfigDict(from_attributes=True)


class LessonSetSummary(BaseModel):
    id: str
    title: str
    total_words: int


class LessonSummary(LessonRead):
    """A lesson with the caller's status, as listed on the curriculum page."""

    user_status: LessonStatus = "not_started"
    started_at: Optional[UTCDateTime] = None
    completed_at: Optional[UTCDateTime] = None
    last_accessed_at: Optional[UTCDateTime] = None
    vocabulary_sets: list[LessonSetSummary] = Field(default_factory=list)


class LessonListResponse(BaseModel):
    lessons: list[LessonSummary] = Field(default_factory=list)


class LessonProgressRead(BaseModel):
    lesson_id: str
    status: LessonStatus = "not_started"
    started_at: Optional[UTCDateTime] = None
    completed_at: Optional[UTCDateTime] = None
    last_accessed_at: Optional[UTCDateTime] = None
    quiz_score: Optional[int] = None
    attempts: int = 0

    model_config = ConfigDict(from_attributes=True)


class LessonProgressUpdate(BaseModel):
    status: LessonStatus


class LessonStepsResponse(BaseModel):
    lesson: LessonRead
    steps: list[LessonStepSchema] = Field(default_factory=list)
    quiz_questions: list[QuizQuestionRead] = Field(default_factory=list)
    total_steps: int


class LessonCreateResponse(BaseModel):
    lesson: LessonRead
    steps: int
    quiz_questions: int


# ----------------------------------------------------------------------
# Quiz
# ----------------------------------------------------------------------
class QuizAnswer(BaseModel):
    question_id: uuid.UUID
    selected_answer: str


class QuizSubmission(BaseModel):
    lesson_id: str = Field(min_length=1)
    attempts: list[QuizAnswer] = Field(min_length=1)


class QuizBreakdown(BaseModel):
    correct_answers: int
    total_questions: int
    xp_per_question: int
    bonus_xp: int


class QuizResult(BaseModel):
    passed: bool
    score: int
    attempts: int
    min_score: int
    xp_awarded: int
    breakdown: QuizBreakdown
    results: dict[str, bool] = Field(default_factory=dict)


class ReviewLesson(BaseModel):
    id: str
    title: str
    week_number: int


class ReviewQuestion(QuizQuestionRead):
    lesson_title: str
    week_number: int


class ReviewQuestionsResponse(BaseModel):
    questions: list[ReviewQuestion] = Field(default_factory=list)
    lessons: list[ReviewLesson] = Field(default_factory=list)
    total_questions: int


__all__ = [
    "AdjectiveComparisonContent",
    "CompletionContent",
    "ConceptContent",
    "LessonCreate",
    "LessonCreateResponse",
    "LessonListResponse",
    "LessonProgressRead",
    "LessonProgressUpdate",
    "LessonRead",
    "LessonStatus",
    "LessonStepSchema",
    "LessonStepsResponse",
    "LessonSummary",
    "ObjectiveContent",
    "QuizAnswer",
    "QuizBreakdown",
    "QuizContent",
    "QuizQuestionIn",
    "QuizQuestionRead",
    "QuizResult",
    "QuizSubmission",
    "ReviewQuestion",
    "ReviewQuestionsResponse",
    "ScriptureContent",
    "VocabularyContent",
]
