"""Client credential repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from qna.domain.model.credential import ClientCredential


class CredentialRepository(ABC):
    """Read-only lookup of login credentials."""

    @abstractmethod
    async def find_by_client_id(self, client_id: str) -> Optional[ClientCredential]:
        """Find credentials by client ID.

        Returns:
            The credentials if found, None otherwise
        """
        pass
