"""PostgreSQL implementation of Account repository."""

from typing import List

from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from qna.domain.error import AccountNotFoundError, DuplicateIdentifierError
from qna.domain.model import Account
from qna.domain.repository import AccountRepository
from qna.domain.value import AccountId
from qna.persistence.mappers import account_to_dict, row_to_account
from qna.persistence.repository.common import storage_errors
from qna.persistence.tables import accounts_table


class PostgresAccountRepository(AccountRepository):
    """PostgreSQL implementation of AccountRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def get(self, account_id: AccountId) -> Account:
        """Get an account by ID."""
        stmt = select(accounts_table).where(accounts_table.c.id == account_id.root)
        with storage_errors("account.get"):
            result = await self.session.execute(stmt)
            row = result.fetchone()
        if row is None:
            raise AccountNotFoundError(account_id)
        return row_to_account(row._asdict())

    async def get_by_email(self, email: str) -> Account:
        """Get an account by email."""
        stmt = select(accounts_table).where(accounts_table.c.email == email)
        with storage_errors("account.get_by_email"):
            result = await self.session.execute(stmt)
            row = result.fetchone()
        if row is None:
            raise AccountNotFoundError(email)
        return row_to_account(row._asdict())

    async def list_all(self) -> List[Account]:
        """Get every account ordered by ID."""
        stmt = select(accounts_table).order_by(accounts_table.c.id)
        with storage_errors("account.list_all"):
            result = await self.session.execute(stmt)
            return [row_to_account(row._asdict()) for row in result.fetchall()]

    async def insert(self, account: Account) -> Account:
        """Insert an account; email is the primary key."""
        stmt = (
            insert(accounts_table)
            .values(**account_to_dict(account))
            .returning(accounts_table)
        )
        with storage_errors("account.insert"):
            try:
                async with self.session.begin_nested():
                    result = await self.session.execute(stmt)
                    row = result.fetchone()
            except IntegrityError as e:
                raise DuplicateIdentifierError("Account", account.email) from e
        return row_to_account(row._asdict())

    async def update_by_email(self, email: str, account: Account) -> Account:
        """Replace email and password of the account stored under email."""
        stmt = (
            update(accounts_table)
            .where(accounts_table.c.email == email)
            .values(email=account.email, password=account.password)
            .returning(accounts_table)
        )
        with storage_errors("account.update_by_email"):
            try:
                async with self.session.begin_nested():
                    result = await self.session.execute(stmt)
                    row = result.fetchone()
            except IntegrityError as e:
                raise DuplicateIdentifierError("Account", account.email) from e
        if row is None:
            raise AccountNotFoundError(email)
        return row_to_account(row._asdict())

    async def delete_by_email(self, email: str) -> None:
        """Delete the account stored under email."""
        stmt = (
            delete(accounts_table)
            .where(accounts_table.c.email == email)
            .returning(accounts_table.c.id)
        )
        with storage_errors("account.delete_by_email"):
            result = await self.session.execute(stmt)
            row = result.fetchone()
        if row is None:
            raise AccountNotFoundError(email)
