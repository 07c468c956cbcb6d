"""JWT token utilities."""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from qna.config import AuthSettings


class TokenPayload(BaseModel):
    """JWT token payload."""

    full_name: str
    email: str
    exp: datetime


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(full_name: str, email: str, settings: AuthSettings) -> str:
    """Create a signed JWT token for a client.

    Args:
        full_name: Client display name
        email: Client email (identity claim)
        settings: Authentication settings

    Returns:
        Encoded JWT token

    Raises:
        JWTError: If the token cannot be encoded with the configured key
    """
    expiry = datetime.now(timezone.utc) + timedelta(
        minutes=settings.jwt_expiry_minutes
    )

    payload = {
        "full_name": full_name,
        "email": email,
        "exp": expiry,
    }

    try:
        return jwt.encode(
            payload, settings.jwt_secret, algorithm=settings.jwt_algorithm
        )
    except (jwt.PyJWTError, NotImplementedError, TypeError, ValueError) as e:
        raise JWTError(f"Token creation failed: {e}") from e


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a JWT token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp"]},
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except (jwt.InvalidTokenError, ValueError):
        raise JWTError("Invalid token")
