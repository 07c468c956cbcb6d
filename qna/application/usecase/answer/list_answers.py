"""List answers use case."""

from pydantic import BaseModel

from qna.application.usecase.base import BaseUseCase
from qna.application.usecase.common import require_identifier
from qna.domain.model.answer import Answer
from qna.domain.service import AnswerService, QuestionService
from qna.domain.value import QuestionId


class ListAnswersRequest(BaseModel):
    """List answers request; ``question_id`` is the raw ``id`` query parameter."""

    question_id: str | None = None


class ListAnswersResponse(BaseModel):
    """List answers response."""

    answers: list[Answer]


class ListAnswersUseCase(BaseUseCase[ListAnswersRequest, ListAnswersResponse]):
    """Use case for listing the answers of a question."""

    def __init__(
        self, question_service: QuestionService, answer_service: AnswerService
    ) -> None:
        self.question_service = question_service
        self.answer_service = answer_service

    async def execute(self, request: ListAnswersRequest) -> ListAnswersResponse:
        """List answers, failing when the question itself is absent.

        Raises:
            MissingParametersError: If the question ID is absent
            QuestionNotFoundError: If the question does not exist
        """
        question_id = require_identifier(QuestionId, request.question_id, "id")
        await self.question_service.get_question(question_id)
        answers = await self.answer_service.get_answers(question_id)
        return ListAnswersResponse(answers=answers)
