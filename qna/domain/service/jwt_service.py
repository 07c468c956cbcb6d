"""JWT token domain service."""

import logfire

from qna.config import AuthSettings
from qna.util.jwt import TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for JWT token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, full_name: str, email: str) -> str:
        """Create JWT token for a client.

        Args:
            full_name: Client display name
            email: Client email

        Returns:
            JWT token string

        Raises:
            JWTError: If the token cannot be signed
        """
        with logfire.span("jwt_service.create_token", email=email):
            token = create_token(full_name, email, self.auth_settings)
            logfire.info("JWT token created", email=email)
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            payload = verify_token(token, self.auth_settings)
            logfire.info("JWT token verified", email=payload.email)
            return payload
