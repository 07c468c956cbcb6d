"""Authentication domain service."""

import hmac

import logfire

from qna.domain.error import (
    InvalidTokenError,
    TokenCreationError,
    WrongCredentialsError,
)
from qna.domain.model.credential import ClientCredential
from qna.domain.repository import CredentialRepository
from qna.util.jwt import JWTError, TokenPayload

from .base import Service
from .jwt_service import JWTService


class AuthService(Service):
    """Domain service for client authentication.

    Checks client credentials, issues bearer tokens and recovers the
    claims of presented tokens. Keeps no session state.
    """

    def __init__(
        self,
        jwt_service: JWTService,
        credential_repository: CredentialRepository,
    ) -> None:
        self.jwt_service = jwt_service
        self.credential_repository = credential_repository

    async def check_credentials(
        self, client_id: str, client_secret: str
    ) -> ClientCredential:
        """Look up a client and compare its secret.

        Raises:
            WrongCredentialsError: If the client is unknown or the secret differs
        """
        with logfire.span("auth_service.check_credentials", client_id=client_id):
            credential = await self.credential_repository.find_by_client_id(client_id)
            if credential is None or not hmac.compare_digest(
                credential.client_secret.encode(), client_secret.encode()
            ):
                logfire.warn("Login rejected", client_id=client_id)
                raise WrongCredentialsError()
            return credential

    def issue(self, credential: ClientCredential) -> str:
        """Issue a token carrying the client's identity claims.

        Raises:
            TokenCreationError: If the token cannot be signed
        """
        try:
            return self.jwt_service.create_token(credential.full_name, credential.email)
        except JWTError as e:
            logfire.error("Token creation failed", error=str(e))
            raise TokenCreationError(str(e)) from e

    def authenticate(self, token: str) -> TokenPayload:
        """Verify a bearer token and return its claims.

        Raises:
            InvalidTokenError: If the token is malformed, expired or wrongly signed
        """
        try:
            return self.jwt_service.verify_token(token)
        except JWTError as e:
            logfire.warn("Token rejected", reason=str(e))
            raise InvalidTokenError(str(e)) from e
