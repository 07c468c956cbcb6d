"""Account routes, keyed by email.

Every route is served under both ``/accounts`` and ``/account``.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Query
from fastapi.responses import PlainTextResponse
from fastapi.security import HTTPAuthorizationCredentials
from pydantic import BaseModel, Field

from qna.config import Settings
from qna.domain.error import MissingParametersError
from qna.domain.model.account import Account
from qna.domain.service import AccountService, AuthService
from qna.domain.value import Email, normalize_email
from qna.interface.api.responses import PrettyJSONResponse, pretty_json, text
from qna.interface.api.security import authorize_write, bearer_scheme

router = APIRouter(tags=["accounts"], route_class=DishkaRoute)


class AccountAPIRequest(BaseModel):
    """API request carrying account fields."""

    email: Email
    password: str = Field(max_length=255)


class AccountResponse(BaseModel):
    """Account as returned to clients; the password is never echoed."""

    id: int
    email: str


def _require_email(email: str | None) -> str:
    if email is None or not email.strip():
        raise MissingParametersError("email")
    return normalize_email(email)


@router.get("/accounts", response_class=PrettyJSONResponse)
@router.get("/account", response_class=PrettyJSONResponse, include_in_schema=False)
async def get_account(
    account_service: FromDishka[AccountService],
    email: str | None = Query(default=None),
) -> PrettyJSONResponse:
    """Get an account by email."""
    account = await account_service.get_account(_require_email(email))
    return pretty_json(AccountResponse(id=account.id.root, email=account.email))


@router.post("/accounts", response_class=PlainTextResponse)
@router.post("/account", response_class=PlainTextResponse, include_in_schema=False)
async def create_account(
    request: AccountAPIRequest,
    account_service: FromDishka[AccountService],
    settings: FromDishka[Settings],
    auth_service: FromDishka[AuthService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> PlainTextResponse:
    """Add an account."""
    authorize_write(settings, auth_service, credentials)
    await account_service.add_account(
        Account(email=request.email, password=request.password)
    )
    return text("Account added")


@router.put("/accounts", response_class=PlainTextResponse)
@router.put("/account", response_class=PlainTextResponse, include_in_schema=False)
async def update_account(
    request: AccountAPIRequest,
    account_service: FromDishka[AccountService],
    settings: FromDishka[Settings],
    auth_service: FromDishka[AuthService],
    email: str | None = Query(default=None),
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> PlainTextResponse:
    """Replace the account stored under ``email``."""
    authorize_write(settings, auth_service, credentials)
    await account_service.update_account(
        _require_email(email),
        Account(email=request.email, password=request.password),
    )
    return text("Account updated")


@router.delete("/accounts", response_class=PlainTextResponse)
@router.delete("/account", response_class=PlainTextResponse, include_in_schema=False)
async def delete_account(
    account_service: FromDishka[AccountService],
    settings: FromDishka[Settings],
    auth_service: FromDishka[AuthService],
    email: str | None = Query(default=None),
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> PlainTextResponse:
    """Delete the account stored under ``email``."""
    authorize_write(settings, auth_service, credentials)
    await account_service.delete_account(_require_email(email))
    return text("Account deleted")
