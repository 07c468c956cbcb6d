"""Helpers shared by the in-memory repositories."""

from collections.abc import Iterable
from typing import TypeVar

from qna.domain.error import StorageError
from qna.domain.value import MAX_IDENTIFIER, Identifier

IdT = TypeVar("IdT", bound=Identifier)


def next_identifier(id_type: type[IdT], existing: Iterable[IdT]) -> IdT:
    """Identifier following the largest existing one (1 for an empty store).

    Raises:
        StorageError: If the largest identifier is already MAX_IDENTIFIER
    """
    highest = max(existing, default=None)
    if highest is None:
        return id_type(1)
    if highest.root >= MAX_IDENTIFIER:
        raise StorageError(f"No identifiers left after {highest}")
    return highest.next()
