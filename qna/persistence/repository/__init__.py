"""PostgreSQL repository implementations."""

from qna.persistence.repository.account import PostgresAccountRepository
from qna.persistence.repository.answer import PostgresAnswerRepository
from qna.persistence.repository.credential import PostgresCredentialRepository
from qna.persistence.repository.question import PostgresQuestionRepository

__all__ = [
    "PostgresQuestionRepository",
    "PostgresAnswerRepository",
    "PostgresAccountRepository",
    "PostgresCredentialRepository",
]
