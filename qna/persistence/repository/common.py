"""Helpers shared by the PostgreSQL repositories."""

from collections.abc import Iterator
from contextlib import contextmanager

import logfire
from sqlalchemy.exc import SQLAlchemyError

from qna.domain.error import StorageError


@contextmanager
def storage_errors(operation: str) -> Iterator[None]:
    """Re-raise SQLAlchemy failures as StorageError with the driver message.

    Domain errors raised inside the block pass through unchanged.
    """
    try:
        yield
    except SQLAlchemyError as e:
        message = str(e.orig) if getattr(e, "orig", None) is not None else str(e)
        logfire.error("Storage operation failed", operation=operation, error=message)
        raise StorageError(message) from e
