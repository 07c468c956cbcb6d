"""PostgreSQL implementation of Credential repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from qna.domain.model import ClientCredential
from qna.domain.repository import CredentialRepository
from qna.persistence.mappers import row_to_credential
from qna.persistence.repository.common import storage_errors
from qna.persistence.tables import passwords_table


class PostgresCredentialRepository(CredentialRepository):
    """Reads login credentials from the passwords table."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_client_id(self, client_id: str) -> Optional[ClientCredential]:
        """Find credentials by client ID."""
        stmt = select(passwords_table).where(passwords_table.c.client_id == client_id)
        with storage_errors("credential.find_by_client_id"):
            result = await self.session.execute(stmt)
            row = result.fetchone()
        return row_to_credential(row._asdict()) if row else None
