"""In-memory credential repository."""

from collections.abc import Iterable
from typing import Optional

from qna.domain.model.credential import ClientCredential
from qna.domain.repository.credential import CredentialRepository


class InMemoryCredentialRepository(CredentialRepository):
    """Credentials fixed at construction (seeded from settings)."""

    def __init__(self, credentials: Iterable[ClientCredential] = ()) -> None:
        self._credentials: dict[str, ClientCredential] = {
            c.client_id: c for c in credentials
        }

    async def find_by_client_id(self, client_id: str) -> Optional[ClientCredential]:
        """Find credentials by client ID."""
        return self._credentials.get(client_id)
