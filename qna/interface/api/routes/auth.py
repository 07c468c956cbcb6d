"""Authentication routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Body

from qna.application.usecase.auth import LoginRequest, LoginResponse, LoginUseCase

router = APIRouter(tags=["authentication"], route_class=DishkaRoute)


@router.get("/login", response_model=LoginResponse)
@router.post("/login", response_model=LoginResponse)
async def login(
    login_use_case: FromDishka[LoginUseCase],
    request: LoginRequest | None = Body(default=None),
) -> LoginResponse:
    """Exchange client credentials for a bearer token.

    The credentials travel as a JSON body ``{client_id, client_secret}``.
    A missing body counts as missing credentials.
    """
    return await login_use_case.execute(request or LoginRequest())
