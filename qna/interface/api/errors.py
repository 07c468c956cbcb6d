"""Mapping of errors to HTTP responses.

Store and validation failures answer with a plain text body; auth failures
answer with a JSON ``{status, error}`` document.
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse, Response
import logfire
from starlette.exceptions import HTTPException as StarletteHTTPException

from qna.domain.error import (
    AuthError,
    DomainError,
    DuplicateIdentifierError,
    InvalidTokenError,
    MissingCredentialsError,
    NotFoundError,
    ProfanityServiceError,
    StorageError,
    TokenCreationError,
    ValidationError,
    WrongCredentialsError,
)

NOT_FOUND_TEXT = "Not Found"

# Malformed credentials still get the JSON auth error shape
LOGIN_PATHS = frozenset({"/login"})

AUTH_STATUS: dict[type[AuthError], int] = {
    MissingCredentialsError: status.HTTP_400_BAD_REQUEST,
    InvalidTokenError: status.HTTP_400_BAD_REQUEST,
    WrongCredentialsError: status.HTTP_401_UNAUTHORIZED,
    TokenCreationError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_for(error: DomainError) -> int:
    """HTTP status code for a domain error."""
    if isinstance(error, AuthError):
        return AUTH_STATUS.get(type(error), status.HTTP_400_BAD_REQUEST)
    if isinstance(error, ValidationError):
        return status.HTTP_400_BAD_REQUEST
    if isinstance(error, NotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(error, DuplicateIdentifierError):
        return status.HTTP_409_CONFLICT
    if isinstance(error, ProfanityServiceError):
        return status.HTTP_502_BAD_GATEWAY
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def handle_auth_error(request: Request, exc: AuthError) -> JSONResponse:
    code = status_for(exc)
    logfire.warn("Auth error", path=request.url.path, error=exc.message)
    return JSONResponse({"status": code, "error": exc.message}, status_code=code)


async def handle_domain_error(request: Request, exc: DomainError) -> PlainTextResponse:
    code = status_for(exc)
    if isinstance(exc, StorageError) or code >= 500:
        logfire.error("Request failed", path=request.url.path, error=str(exc))
    else:
        logfire.info("Request rejected", path=request.url.path, error=str(exc))
    return PlainTextResponse(str(exc), status_code=code)


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> Response:
    """Describe the first problem with the request body or query."""
    if request.url.path in LOGIN_PATHS:
        return await handle_auth_error(request, MissingCredentialsError())
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{location}: {first['msg']}" if location else first["msg"]
    else:
        message = "Invalid request"
    return PlainTextResponse(message, status_code=status.HTTP_400_BAD_REQUEST)


async def handle_http_exception(
    request: Request, exc: StarletteHTTPException
) -> PlainTextResponse:
    """Unknown routes and methods answer 404 ``Not Found``."""
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        return PlainTextResponse(NOT_FOUND_TEXT, status_code=status.HTTP_404_NOT_FOUND)
    return PlainTextResponse(
        str(exc.detail), status_code=exc.status_code, headers=exc.headers
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register exception handlers on the app."""
    app.add_exception_handler(AuthError, handle_auth_error)
    app.add_exception_handler(DomainError, handle_domain_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
