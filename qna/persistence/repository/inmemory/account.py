"""In-memory account repository."""

from typing import List

from qna.domain.error import AccountNotFoundError, DuplicateIdentifierError
from qna.domain.model.account import Account
from qna.domain.repository.account import AccountRepository
from qna.domain.value import AccountId
from qna.persistence.repository.inmemory.common import next_identifier
from qna.util.lock import ReadWriteLock


class InMemoryAccountRepository(AccountRepository):
    """In-memory implementation of AccountRepository.

    Accounts are stored by identifier; email lookups scan the collection.
    """

    def __init__(self) -> None:
        self._accounts: dict[AccountId, Account] = {}
        self._lock = ReadWriteLock()

    async def get(self, account_id: AccountId) -> Account:
        """Get an account by ID."""
        async with self._lock.reader():
            account = self._accounts.get(account_id)
        if account is None:
            raise AccountNotFoundError(account_id)
        return account

    async def get_by_email(self, email: str) -> Account:
        """Get an account by email."""
        async with self._lock.reader():
            account = self._find_by_email(email)
        if account is None:
            raise AccountNotFoundError(email)
        return account

    async def list_all(self) -> List[Account]:
        """Snapshot of every account."""
        async with self._lock.reader():
            accounts = list(self._accounts.values())
        return sorted(accounts, key=lambda a: a.id)

    async def insert(self, account: Account) -> Account:
        """Insert an account, assigning the next identifier when absent."""
        async with self._lock.writer():
            if self._find_by_email(account.email) is not None:
                raise DuplicateIdentifierError("Account", account.email)
            if account.id is None:
                account = account.with_id(next_identifier(AccountId, self._accounts))
            elif account.id in self._accounts:
                raise DuplicateIdentifierError("Account", account.id)
            self._accounts[account.id] = account
            return account

    async def update_by_email(self, email: str, account: Account) -> Account:
        """Replace the account stored under email, keeping its identifier."""
        async with self._lock.writer():
            existing = self._find_by_email(email)
            if existing is None:
                raise AccountNotFoundError(email)
            if account.email != email:
                clash = self._find_by_email(account.email)
                if clash is not None:
                    raise DuplicateIdentifierError("Account", account.email)
            stored = account.with_id(existing.id)
            self._accounts[existing.id] = stored
            return stored

    async def delete_by_email(self, email: str) -> None:
        """Delete the account stored under email."""
        async with self._lock.writer():
            existing = self._find_by_email(email)
            if existing is None:
                raise AccountNotFoundError(email)
            del self._accounts[existing.id]

    def _find_by_email(self, email: str) -> Account | None:
        for account in self._accounts.values():
            if account.email == email:
                return account
        return None
