"""Question routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Query
from fastapi.responses import PlainTextResponse
from fastapi.security import HTTPAuthorizationCredentials
from pydantic import BaseModel, Field

from qna.application.usecase.common import require_identifier
from qna.application.usecase.question import (
    CreateQuestionRequest,
    CreateQuestionUseCase,
    ListQuestionsRequest,
    ListQuestionsUseCase,
    UpdateQuestionRequest,
    UpdateQuestionUseCase,
)
from qna.config import Settings
from qna.domain.service import AuthService, QuestionService
from qna.domain.value import NormalizedTags, QuestionId
from qna.interface.api.responses import PrettyJSONResponse, pretty_json, text
from qna.interface.api.security import authorize_write, bearer_scheme

router = APIRouter(tags=["questions"], route_class=DishkaRoute)

WELCOME_TEXT = "Welcome to the questions and answers service!"


class UpdateQuestionAPIRequest(BaseModel):
    """API request for replacing a question."""

    id: QuestionId | None = None
    title: str = Field(max_length=255)
    content: str
    tags: NormalizedTags = None


@router.get("/", response_class=PlainTextResponse)
async def welcome() -> PlainTextResponse:
    """Entry point greeting."""
    return text(WELCOME_TEXT)


@router.get("/questions", response_class=PrettyJSONResponse)
async def list_questions(
    list_questions_use_case: FromDishka[ListQuestionsUseCase],
    start: str | None = Query(default=None),
    end: str | None = Query(default=None),
) -> PrettyJSONResponse:
    """List all questions, or those with ``start <= id <= end``."""
    result = await list_questions_use_case.execute(
        ListQuestionsRequest(start=start, end=end)
    )
    return pretty_json(result.questions)


@router.get("/question", response_class=PrettyJSONResponse)
async def get_question(
    question_service: FromDishka[QuestionService],
    id: str | None = Query(default=None),
) -> PrettyJSONResponse:
    """Get a single question."""
    question_id = require_identifier(QuestionId, id, "id")
    question = await question_service.get_question(question_id)
    return pretty_json(question)


@router.post("/questions", response_class=PlainTextResponse)
async def create_question(
    request: CreateQuestionRequest,
    create_question_use_case: FromDishka[CreateQuestionUseCase],
    settings: FromDishka[Settings],
    auth_service: FromDishka[AuthService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> PlainTextResponse:
    """Add a question."""
    authorize_write(settings, auth_service, credentials)
    await create_question_use_case.execute(request)
    return text("Question added")


@router.put("/questions", response_class=PlainTextResponse)
async def update_question(
    request: UpdateQuestionAPIRequest,
    update_question_use_case: FromDishka[UpdateQuestionUseCase],
    settings: FromDishka[Settings],
    auth_service: FromDishka[AuthService],
    id: str | None = Query(default=None),
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> PlainTextResponse:
    """Replace a question; the ``id`` query parameter wins over the body ID."""
    authorize_write(settings, auth_service, credentials)
    await update_question_use_case.execute(
        UpdateQuestionRequest(
            query_id=id,
            id=request.id,
            title=request.title,
            content=request.content,
            tags=request.tags,
        )
    )
    return text("Question updated")


@router.delete("/questions", response_class=PlainTextResponse)
async def delete_question(
    question_service: FromDishka[QuestionService],
    settings: FromDishka[Settings],
    auth_service: FromDishka[AuthService],
    id: str | None = Query(default=None),
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> PlainTextResponse:
    """Delete a question. Its answers are kept."""
    authorize_write(settings, auth_service, credentials)
    question_id = require_identifier(QuestionId, id, "id")
    await question_service.delete_question(question_id)
    return text("Question deleted")
