"""Database models package."""
from hebrew_app.db.models.user import User
from hebrew_app.db.models.vocabulary import UserActiveSet, VocabSet, VocabWord
from hebrew_app.db.models.progress import ReviewLog, UserProgress
from hebrew_app.db.models.stats import UserStats
from hebrew_app.db.models.achievement import Achievement, AchievementProgress
from hebrew_app.db.models.lesson import (
    Lesson,
    LessonStep,
    QuizQuestion,
    UserLessonProgress,
    UserQuizAttempt,
)
from hebrew_app.db.models.study import StudySession, StudyTime
from hebrew_app.db.models.bible import BibleBook, BibleVerse, BibleWord, StrongsEntry

__all__ = [
    "User",
    "VocabSet",
    "VocabWord",
    "UserActiveSet",
    "UserProgress",
    "ReviewLog",
    "UserStats",
    "Achievement",
    "AchievementProgress",
    "Lesson",
    "LessonStep",
    "QuizQuestion",
    "UserLessonProgress",
    "UserQuizAttempt",
    "StudySession",
    "StudyTime",
    "BibleBook",
    "BibleVerse",
    "BibleWord",
    "StrongsEntry",
]
