"""Repository interfaces.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from qna.domain.repository.account import AccountRepository
from qna.domain.repository.answer import AnswerRepository
from qna.domain.repository.credential import CredentialRepository
from qna.domain.repository.question import QuestionRepository

__all__ = [
    "QuestionRepository",
    "AnswerRepository",
    "AccountRepository",
    "CredentialRepository",
]
