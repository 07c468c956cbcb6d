"""Domain value types."""

from collections.abc import Iterable
from typing import Annotated, Optional

from pydantic import BeforeValidator, Field, PlainSerializer

Tags = frozenset[str]


def normalize_tags(value: Optional[Iterable[str]]) -> Optional[Tags]:
    """Normalize a tag collection.

    Tags are stripped, blank entries dropped and duplicates removed. An empty
    result means "no tags" and normalizes to None rather than an empty set.

    Examples:
        normalize_tags(["rust", " rust ", ""]) -> frozenset({"rust"})
        normalize_tags([]) -> None
    """
    if value is None:
        return None
    if isinstance(value, str):
        # A bare string is one tag, not a sequence of characters
        value = [value]
    if not isinstance(value, Iterable):
        raise ValueError("tags must be a list of strings")
    value = list(value)
    if any(not isinstance(tag, str) for tag in value):
        raise ValueError("tags must be strings")
    tags = frozenset(tag.strip() for tag in value if tag.strip())
    return tags or None


def _serialize_tags(tags: Optional[Tags]) -> Optional[list[str]]:
    return sorted(tags) if tags is not None else None


# Field type used by records carrying tags: sorted list on the wire
NormalizedTags = Annotated[
    Optional[Tags],
    BeforeValidator(normalize_tags),
    PlainSerializer(_serialize_tags, return_type=Optional[list[str]]),
]


def normalize_email(value: object) -> str:
    """Strip an email address; the stripped form is the account lookup key."""
    if not isinstance(value, str):
        raise ValueError("email must be a string")
    value = value.strip()
    if not value:
        raise ValueError("email must not be blank")
    return value


Email = Annotated[str, BeforeValidator(normalize_email), Field(max_length=255)]
