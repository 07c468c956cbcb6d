"""Account domain service."""

import logfire

from qna.domain.model.account import Account
from qna.domain.repository import AccountRepository

from .base import Service


class AccountService(Service):
    """Domain service for account operations, keyed by email."""

    def __init__(self, account_repository: AccountRepository) -> None:
        self.account_repository = account_repository

    async def get_account(self, email: str) -> Account:
        """Get an account by email.

        Raises:
            AccountNotFoundError: If no account has this email
        """
        with logfire.span("account_service.get_account", email=email):
            return await self.account_repository.get_by_email(email)

    async def add_account(self, account: Account) -> Account:
        """Add an account.

        Raises:
            DuplicateIdentifierError: If the email is taken
        """
        with logfire.span("account_service.add_account", email=account.email):
            saved = await self.account_repository.insert(account)
            logfire.info("Account added", account_id=str(saved.id))
            return saved

    async def update_account(self, email: str, account: Account) -> Account:
        """Replace the account stored under email."""
        with logfire.span("account_service.update_account", email=email):
            saved = await self.account_repository.update_by_email(email, account)
            logfire.info("Account updated", account_id=str(saved.id))
            return saved

    async def delete_account(self, email: str) -> None:
        """Delete the account stored under email."""
        with logfire.span("account_service.delete_account", email=email):
            await self.account_repository.delete_by_email(email)
            logfire.info("Account deleted", email=email)
