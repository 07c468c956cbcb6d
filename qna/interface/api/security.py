"""Bearer token guard for mutating routes."""

from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from qna.config import Settings
from qna.domain.error import InvalidTokenError
from qna.domain.service import AuthService
from qna.util.jwt import TokenPayload

bearer_scheme = HTTPBearer(auto_error=False)


def authorize_write(
    settings: Settings,
    auth_service: AuthService,
    credentials: HTTPAuthorizationCredentials | None,
) -> TokenPayload | None:
    """Check the bearer token of a mutating request.

    Does nothing unless ``auth.protect_writes`` is enabled.

    Raises:
        InvalidTokenError: If the token is missing, malformed or expired
    """
    if not settings.auth.protect_writes:
        return None
    if credentials is None or not credentials.credentials:
        raise InvalidTokenError("Missing bearer token")
    return auth_service.authenticate(credentials.credentials)
