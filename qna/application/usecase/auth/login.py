"""Login use case."""

import logfire
from pydantic import BaseModel

from qna.application.usecase.base import BaseUseCase
from qna.domain.error import MissingCredentialsError
from qna.domain.service import AuthService


class LoginRequest(BaseModel):
    """Login request with client credentials."""

    client_id: str = ""
    client_secret: str = ""


class LoginResponse(BaseModel):
    """Login response carrying a bearer token."""

    access_token: str
    token_type: str = "Bearer"


class LoginUseCase(BaseUseCase[LoginRequest, LoginResponse]):
    """Use case for exchanging client credentials for a bearer token."""

    def __init__(self, auth_service: AuthService) -> None:
        """Initialize login use case.

        Args:
            auth_service: Authentication domain service
        """
        self.auth_service = auth_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Execute login flow.

        Steps:
        1. Reject blank client ID or secret
        2. Look up the client and compare secrets
        3. Sign a token with the client's identity claims

        Raises:
            MissingCredentialsError: If a credential is blank
            WrongCredentialsError: If the client is unknown or the secret differs
            TokenCreationError: If the token cannot be signed
        """
        if not request.client_id.strip() or not request.client_secret.strip():
            raise MissingCredentialsError()

        with logfire.span("login.execute", client_id=request.client_id):
            credential = await self.auth_service.check_credentials(
                request.client_id, request.client_secret
            )
            token = self.auth_service.issue(credential)
            logfire.info("Client logged in", client_id=request.client_id)
            return LoginResponse(access_token=token)
