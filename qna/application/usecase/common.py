"""Helpers shared by use cases."""

from typing import Optional, Type, TypeVar

from qna.domain.error import MissingParametersError
from qna.domain.value import Identifier

IdentifierT = TypeVar("IdentifierT", bound=Identifier)


def require_identifier(
    id_type: Type[IdentifierT], raw: Optional[str], parameter: str
) -> IdentifierT:
    """Parse a required identifier from untrusted input.

    Raises:
        MissingParametersError: If the value is absent or blank
        InvalidIdentifierError: If the value is not a valid identifier
    """
    if raw is None or not raw.strip():
        raise MissingParametersError(parameter)
    return id_type.parse(raw)
