"""Account repository interface."""

from abc import ABC, abstractmethod
from typing import List

from qna.domain.model.account import Account
from qna.domain.value import AccountId


class AccountRepository(ABC):
    """Store for the account collection, keyed by email externally."""

    @abstractmethod
    async def get(self, account_id: AccountId) -> Account:
        """Get an account by ID.

        Raises:
            AccountNotFoundError: If no account has this identifier
        """
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Account:
        """Get an account by email.

        Raises:
            AccountNotFoundError: If no account has this email
        """
        pass

    @abstractmethod
    async def list_all(self) -> List[Account]:
        """Snapshot of every account, ordered by identifier."""
        pass

    @abstractmethod
    async def insert(self, account: Account) -> Account:
        """Insert a new account, assigning an identifier when absent.

        Raises:
            DuplicateIdentifierError: If the email or identifier is already taken
        """
        pass

    @abstractmethod
    async def update_by_email(self, email: str, account: Account) -> Account:
        """Replace the account stored under ``email``, keeping its identifier.

        Raises:
            AccountNotFoundError: If no account has this email
            DuplicateIdentifierError: If the new email belongs to another account
        """
        pass

    @abstractmethod
    async def delete_by_email(self, email: str) -> None:
        """Delete the account stored under ``email``.

        Raises:
            AccountNotFoundError: If no account has this email
        """
        pass
