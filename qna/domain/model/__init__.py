"""Domain model entities."""

from qna.domain.model.account import Account
from qna.domain.model.answer import Answer
from qna.domain.model.credential import ClientCredential
from qna.domain.model.question import Question

__all__ = [
    "Question",
    "Answer",
    "Account",
    "ClientCredential",
]
