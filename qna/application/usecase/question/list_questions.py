"""List questions use case."""

import logfire
from pydantic import BaseModel

from qna.application.usecase.base import BaseUseCase
from qna.domain.error import MissingParametersError
from qna.domain.model.question import Question
from qna.domain.service import QuestionService
from qna.domain.value import QuestionId


class ListQuestionsRequest(BaseModel):
    """List questions request.

    Both bounds absent lists every question; both present lists the
    inclusive range ``[start, end]``.
    """

    start: str | None = None
    end: str | None = None


class ListQuestionsResponse(BaseModel):
    """List questions response."""

    questions: list[Question]


class ListQuestionsUseCase(BaseUseCase[ListQuestionsRequest, ListQuestionsResponse]):
    """Use case for listing questions, optionally by identifier range."""

    def __init__(self, question_service: QuestionService) -> None:
        self.question_service = question_service

    async def execute(self, request: ListQuestionsRequest) -> ListQuestionsResponse:
        """List questions.

        Raises:
            MissingParametersError: If only one bound is given
            InvalidIdentifierError: If a bound is not a valid identifier
        """
        if request.start is None and request.end is None:
            questions = await self.question_service.list_questions()
            return ListQuestionsResponse(questions=questions)

        if request.start is None or request.end is None:
            missing = "start" if request.start is None else "end"
            logfire.warn("Range query missing a bound", missing=missing)
            raise MissingParametersError(missing)

        start = QuestionId.parse(request.start)
        end = QuestionId.parse(request.end)
        questions = await self.question_service.list_questions_in_range(start, end)
        return ListQuestionsResponse(questions=questions)
