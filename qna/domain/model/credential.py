"""Client credential entity used by the login flow."""

from qna.domain.model.common import DomainModel


class ClientCredential(DomainModel):
    """Login credentials for an API client.

    The identity claims of issued tokens (full name, email) come from here.
    """

    client_id: str
    client_secret: str
    full_name: str
    email: str
