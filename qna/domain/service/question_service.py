"""Question domain service."""

from typing import List

import logfire

from qna.domain.model.question import Question
from qna.domain.repository import QuestionRepository
from qna.domain.value import QuestionId

from .base import Service


class QuestionService(Service):
    """Domain service for question operations."""

    def __init__(self, question_repository: QuestionRepository) -> None:
        """Initialize question service.

        Args:
            question_repository: Question repository
        """
        self.question_repository = question_repository

    async def get_question(self, question_id: QuestionId) -> Question:
        """Get a question by ID.

        Raises:
            QuestionNotFoundError: If the question does not exist
        """
        with logfire.span("question_service.get_question", question_id=str(question_id)):
            return await self.question_repository.get(question_id)

    async def list_questions(self) -> List[Question]:
        """List every question."""
        with logfire.span("question_service.list_questions"):
            questions = await self.question_repository.list_all()
            logfire.info("Questions listed", count=len(questions))
            return questions

    async def list_questions_in_range(
        self, start: QuestionId, end: QuestionId
    ) -> List[Question]:
        """List questions whose ID lies in [start, end]."""
        with logfire.span(
            "question_service.list_questions_in_range", start=str(start), end=str(end)
        ):
            questions = await self.question_repository.list_range(start, end)
            logfire.info(
                "Questions listed in range",
                start=str(start),
                end=str(end),
                count=len(questions),
            )
            return questions

    async def add_question(self, question: Question) -> Question:
        """Add a question.

        Raises:
            DuplicateIdentifierError: If the question ID is taken
        """
        with logfire.span(
            "question_service.add_question",
            question_id=str(question.id) if question.id else None,
            title=question.title,
        ):
            saved = await self.question_repository.insert(question)
            logfire.info("Question added", question_id=str(saved.id))
            return saved

    async def update_question(
        self, question_id: QuestionId, question: Question
    ) -> Question:
        """Replace a question.

        Raises:
            QuestionNotFoundError: If the question does not exist
        """
        with logfire.span(
            "question_service.update_question", question_id=str(question_id)
        ):
            saved = await self.question_repository.update(question_id, question)
            logfire.info("Question updated", question_id=str(question_id))
            return saved

    async def delete_question(self, question_id: QuestionId) -> None:
        """Delete a question. Its answers are kept.

        Raises:
            QuestionNotFoundError: If the question does not exist
        """
        with logfire.span(
            "question_service.delete_question", question_id=str(question_id)
        ):
            await self.question_repository.delete(question_id)
            logfire.info("Question deleted", question_id=str(question_id))

    async def question_exists(self, question_id: QuestionId) -> bool:
        """Whether a question exists."""
        return await self.question_repository.exists(question_id)
