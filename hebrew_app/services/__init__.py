"""Service layer package."""

from hebrew_app.services.achievement import AchievementService
from hebrew_app.services.auth import AuthService
from hebrew_app.services.bible import BibleService
from hebrew_app.services.lessons import LessonService
from hebrew_app.services.progress import ProgressService
from hebrew_app.services.quiz import QuizService
from hebrew_app.services.stats import StatsService
from hebrew_app.services.study import StudySessionService, StudyTimerService
from hebrew_app.services.users import UserService
from hebrew_app.services.vocabulary import VocabularyService

__all__ = [
    "AchievementService",
    "AuthService",
    "BibleService",
    "LessonService",
    "ProgressService",
    "QuizService",
    "StatsService",
    "StudySessionService",
    "StudyTimerService",
    "UserService",
    "VocabularyService",
]
