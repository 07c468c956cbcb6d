"""Create question use case."""

import logfire
from pydantic import BaseModel, Field

from qna.application.usecase.base import BaseUseCase
from qna.domain.model.question import Question
from qna.domain.service import ProfanityFilter, QuestionService
from qna.domain.value import NormalizedTags, QuestionId


class CreateQuestionRequest(BaseModel):
    """Create question request.

    ``id`` is optional; the store assigns one when it is omitted.
    """

    id: QuestionId | None = None
    title: str = Field(max_length=255)
    content: str
    tags: NormalizedTags = None


class CreateQuestionResponse(BaseModel):
    """Create question response."""

    question: Question


class CreateQuestionUseCase(BaseUseCase[CreateQuestionRequest, CreateQuestionResponse]):
    """Use case for adding a question."""

    def __init__(
        self, question_service: QuestionService, profanity_filter: ProfanityFilter
    ) -> None:
        """Initialize create question use case.

        Args:
            question_service: Question domain service
            profanity_filter: Filter applied to title and content
        """
        self.question_service = question_service
        self.profanity_filter = profanity_filter

    async def execute(self, request: CreateQuestionRequest) -> CreateQuestionResponse:
        """Censor the question text and insert it.

        Raises:
            ProfanityServiceError: If the text could not be censored
            DuplicateIdentifierError: If the question ID is taken
        """
        with logfire.span("create_question.execute", title=request.title):
            # Censoring happens before the store is touched
            title = await self.profanity_filter.censor(request.title)
            content = await self.profanity_filter.censor(request.content)

            question = Question(
                id=request.id,
                title=title,
                content=content,
                tags=request.tags,
            )
            saved = await self.question_service.add_question(question)
            return CreateQuestionResponse(question=saved)
