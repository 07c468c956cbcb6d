"""Answer routes, keyed by question ID."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Query
from fastapi.responses import PlainTextResponse
from fastapi.security import HTTPAuthorizationCredentials
from pydantic import BaseModel

from qna.application.usecase.answer import (
    CreateAnswerRequest,
    CreateAnswerUseCase,
    ListAnswersRequest,
    ListAnswersUseCase,
    UpdateAnswerRequest,
    UpdateAnswerUseCase,
)
from qna.application.usecase.common import require_identifier
from qna.config import Settings
from qna.domain.service import AnswerService, AuthService
from qna.domain.value import QuestionId
from qna.interface.api.responses import PrettyJSONResponse, pretty_json, text
from qna.interface.api.security import authorize_write, bearer_scheme

router = APIRouter(prefix="/answers", tags=["answers"], route_class=DishkaRoute)


class UpdateAnswerAPIRequest(BaseModel):
    """API request for replacing answer content."""

    content: str


@router.get("", response_class=PrettyJSONResponse)
async def list_answers(
    list_answers_use_case: FromDishka[ListAnswersUseCase],
    id: str | None = Query(default=None),
) -> PrettyJSONResponse:
    """List the answers of a question."""
    result = await list_answers_use_case.execute(ListAnswersRequest(question_id=id))
    return pretty_json(result.answers)


@router.post("", response_class=PlainTextResponse)
async def create_answer(
    request: CreateAnswerRequest,
    create_answer_use_case: FromDishka[CreateAnswerUseCase],
    settings: FromDishka[Settings],
    auth_service: FromDishka[AuthService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> PlainTextResponse:
    """Answer a question."""
    authorize_write(settings, auth_service, credentials)
    await create_answer_use_case.execute(request)
    return text("Answer added")


@router.put("", response_class=PlainTextResponse)
async def update_answer(
    request: UpdateAnswerAPIRequest,
    update_answer_use_case: FromDishka[UpdateAnswerUseCase],
    settings: FromDishka[Settings],
    auth_service: FromDishka[AuthService],
    id: str | None = Query(default=None),
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> PlainTextResponse:
    """Replace the content of a question's answers."""
    authorize_write(settings, auth_service, credentials)
    await update_answer_use_case.execute(
        UpdateAnswerRequest(question_id=id, content=request.content)
    )
    return text("Answer updated")


@router.delete("", response_class=PlainTextResponse)
async def delete_answers(
    answer_service: FromDishka[AnswerService],
    settings: FromDishka[Settings],
    auth_service: FromDishka[AuthService],
    id: str | None = Query(default=None),
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> PlainTextResponse:
    """Delete the answers of a question."""
    authorize_write(settings, auth_service, credentials)
    question_id = require_identifier(QuestionId, id, "id")
    await answer_service.delete_answers(question_id)
    return text("Answer deleted")
