"""Create answer use case."""

import logfire
from pydantic import BaseModel

from qna.application.usecase.base import BaseUseCase
from qna.domain.error import QuestionNotFoundError
from qna.domain.model.answer import Answer
from qna.domain.service import AnswerService, ProfanityFilter, QuestionService
from qna.domain.value import QuestionId


class CreateAnswerRequest(BaseModel):
    """Create answer request."""

    content: str
    question_id: QuestionId


class CreateAnswerResponse(BaseModel):
    """Create answer response."""

    answer: Answer


class CreateAnswerUseCase(BaseUseCase[CreateAnswerRequest, CreateAnswerResponse]):
    """Use case for answering an existing question."""

    def __init__(
        self,
        question_service: QuestionService,
        answer_service: AnswerService,
        profanity_filter: ProfanityFilter,
    ) -> None:
        """Initialize create answer use case.

        Args:
            question_service: Question domain service
            answer_service: Answer domain service
            profanity_filter: Filter applied to the answer content
        """
        self.question_service = question_service
        self.answer_service = answer_service
        self.profanity_filter = profanity_filter

    async def execute(self, request: CreateAnswerRequest) -> CreateAnswerResponse:
        """Check the question exists, censor the content and insert the answer.

        Raises:
            QuestionNotFoundError: If the question does not exist
            ProfanityServiceError: If the content could not be censored
        """
        with logfire.span(
            "create_answer.execute", question_id=str(request.question_id)
        ):
            if not await self.question_service.question_exists(request.question_id):
                raise QuestionNotFoundError(request.question_id)

            content = await self.profanity_filter.censor(request.content)
            answer = Answer(content=content, question_id=request.question_id)
            saved = await self.answer_service.add_answer(answer)
            return CreateAnswerResponse(answer=saved)
