"""Update question use case."""

import logfire
from pydantic import BaseModel, Field

from qna.application.usecase.base import BaseUseCase
from qna.application.usecase.common import require_identifier
from qna.domain.model.question import Question
from qna.domain.service import ProfanityFilter, QuestionService
from qna.domain.value import NormalizedTags, QuestionId


class UpdateQuestionRequest(BaseModel):
    """Update question request.

    ``query_id`` comes from the ``id`` query parameter and wins over the
    ``id`` in the body.
    """

    query_id: str | None = None
    id: QuestionId | None = None
    title: str = Field(max_length=255)
    content: str
    tags: NormalizedTags = None


class UpdateQuestionResponse(BaseModel):
    """Update question response."""

    question: Question


class UpdateQuestionUseCase(BaseUseCase[UpdateQuestionRequest, UpdateQuestionResponse]):
    """Use case for replacing a question."""

    def __init__(
        self, question_service: QuestionService, profanity_filter: ProfanityFilter
    ) -> None:
        self.question_service = question_service
        self.profanity_filter = profanity_filter

    async def execute(self, request: UpdateQuestionRequest) -> UpdateQuestionResponse:
        """Resolve the target ID, censor the text and replace the record.

        Raises:
            MissingParametersError: If neither the query nor the body has an ID
            InvalidIdentifierError: If the query ID is malformed
            QuestionNotFoundError: If the question does not exist
        """
        if request.query_id is not None or request.id is None:
            question_id = require_identifier(QuestionId, request.query_id, "id")
        else:
            question_id = request.id

        with logfire.span("update_question.execute", question_id=str(question_id)):
            title = await self.profanity_filter.censor(request.title)
            content = await self.profanity_filter.censor(request.content)

            question = Question(
                id=question_id,
                title=title,
                content=content,
                tags=request.tags,
            )
            saved = await self.question_service.update_question(question_id, question)
            return UpdateQuestionResponse(question=saved)
