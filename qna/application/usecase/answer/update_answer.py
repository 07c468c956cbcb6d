"""Update answer use case."""

import logfire
from pydantic import BaseModel

from qna.application.usecase.base import BaseUseCase
from qna.application.usecase.common import require_identifier
from qna.domain.model.answer import Answer
from qna.domain.service import AnswerService, ProfanityFilter
from qna.domain.value import QuestionId


class UpdateAnswerRequest(BaseModel):
    """Update answer request; ``question_id`` is the raw ``id`` query parameter."""

    question_id: str | None = None
    content: str


class UpdateAnswerResponse(BaseModel):
    """Update answer response."""

    updated: int


class UpdateAnswerUseCase(BaseUseCase[UpdateAnswerRequest, UpdateAnswerResponse]):
    """Use case for replacing the content of a question's answers."""

    def __init__(
        self, answer_service: AnswerService, profanity_filter: ProfanityFilter
    ) -> None:
        self.answer_service = answer_service
        self.profanity_filter = profanity_filter

    async def execute(self, request: UpdateAnswerRequest) -> UpdateAnswerResponse:
        """Censor the content and write it to every answer of the question.

        Raises:
            MissingParametersError: If the question ID is absent
            AnswerNotFoundError: If the question has no answers
        """
        question_id = require_identifier(QuestionId, request.question_id, "id")

        with logfire.span("update_answer.execute", question_id=str(question_id)):
            content = await self.profanity_filter.censor(request.content)
            answer = Answer(content=content, question_id=question_id)
            updated = await self.answer_service.update_answers(question_id, answer)
            return UpdateAnswerResponse(updated=updated)
