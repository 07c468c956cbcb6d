"""Account entity."""

from typing import Optional

from pydantic import Field

from qna.domain.model.common import DomainModel
from qna.domain.value import AccountId, Email


class Account(DomainModel):
    """User account.

    ``email`` is the external lookup key and is unique per store. The password
    is stored exactly as given; hashing belongs to the caller.
    """

    id: Optional[AccountId] = None
    email: Email
    password: str = Field(max_length=255)

    def with_id(self, account_id: AccountId) -> "Account":
        """Return a copy of this account stored under ``account_id``."""
        return self.model_copy(update={"id": account_id})
