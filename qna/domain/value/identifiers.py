"""Strongly typed identifiers for questions, answers and accounts.

Identifiers wrap a non-negative 32-bit integer (the range of a Postgres
``serial`` column). They are immutable, hash and compare by value, and order
numerically, so ``QuestionId(9) < QuestionId(10)``.
"""

from typing import Any, Self

from pydantic import ValidationError, field_validator

from qna.domain.error import InvalidIdentifierError
from qna.domain.value.common import RootValueObject

MAX_IDENTIFIER = 2**31 - 1


class Identifier(RootValueObject[int]):
    """Base class for integer record identifiers."""

    @field_validator("root", mode="before")
    @classmethod
    def reject_non_integers(cls, v: Any) -> Any:
        """Reject booleans and floats that pydantic would otherwise coerce."""
        if isinstance(v, bool) or isinstance(v, float):
            raise ValueError("identifier must be an integer")
        if isinstance(v, str):
            v = v.strip()
            if not v:
                raise ValueError("identifier must not be empty")
        return v

    @field_validator("root")
    @classmethod
    def validate_range(cls, v: int) -> int:
        """Validate identifier is within the non-negative 32-bit range."""
        if v < 0:
            raise ValueError("identifier must not be negative")
        if v > MAX_IDENTIFIER:
            raise ValueError(f"identifier must not exceed {MAX_IDENTIFIER}")
        return v

    @classmethod
    def parse(cls, raw: Any) -> Self:
        """Build an identifier from untrusted input (query strings, JSON).

        Raises:
            InvalidIdentifierError: If the value is empty, not an integer or out of range
        """
        if isinstance(raw, cls):
            return raw
        try:
            return cls(raw)
        except ValidationError as e:
            reason = e.errors()[0]["msg"].removeprefix("Value error, ")
            raise InvalidIdentifierError(raw, reason) from e

    def next(self) -> Self:
        """Identifier immediately following this one."""
        return type(self)(self.root + 1)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Identifier):
            return NotImplemented
        return self.root < other.root

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Identifier):
            return NotImplemented
        return self.root <= other.root

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Identifier):
            return NotImplemented
        return self.root > other.root

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Identifier):
            return NotImplemented
        return self.root >= other.root


class QuestionId(Identifier):
    """Question identifier."""


class AnswerId(Identifier):
    """Answer identifier (assigned by the store)."""


class AccountId(Identifier):
    """Account identifier (assigned by the store)."""
