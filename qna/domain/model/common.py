"""Base model for stored records."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for questions, answers, accounts and credentials.

    Records are frozen: an update replaces the whole record in the store.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)
