"""In-memory repository implementations."""

from .account import InMemoryAccountRepository
from .answer import InMemoryAnswerRepository
from .credential import InMemoryCredentialRepository
from .question import InMemoryQuestionRepository

__all__ = [
    "InMemoryAccountRepository",
    "InMemoryAnswerRepository",
    "InMemoryCredentialRepository",
    "InMemoryQuestionRepository",
]
