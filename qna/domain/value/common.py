"""Base class for value objects."""

from typing import Generic, TypeVar

from pydantic import ConfigDict, RootModel

T = TypeVar("T")


class RootValueObject(RootModel[T], Generic[T]):
    """A frozen wrapper around one primitive.

    Serializes as the bare primitive (``QuestionId(7)`` dumps to ``7``) and
    hashes by value, so instances key the in-memory collections directly.
    """

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return str(self.root)
