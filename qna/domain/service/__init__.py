"""Domain services."""

from .account_service import AccountService
from .answer_service import AnswerService
from .auth_service import AuthService
from .base import Service
from .jwt_service import JWTService
from .profanity import ProfanityFilter
from .question_service import QuestionService

__all__ = [
    "AccountService",
    "AnswerService",
    "AuthService",
    "JWTService",
    "ProfanityFilter",
    "QuestionService",
    "Service",
]
