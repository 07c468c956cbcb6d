"""Domain value objects."""

from qna.domain.value.identifiers import (
    MAX_IDENTIFIER,
    AccountId,
    AnswerId,
    Identifier,
    QuestionId,
)
from qna.domain.value.types import (
    Email,
    NormalizedTags,
    Tags,
    normalize_email,
    normalize_tags,
)

__all__ = [
    # Identifiers
    "Identifier",
    "QuestionId",
    "AnswerId",
    "AccountId",
    "MAX_IDENTIFIER",
    # Types
    "Tags",
    "NormalizedTags",
    "normalize_tags",
    "Email",
    "normalize_email",
]
