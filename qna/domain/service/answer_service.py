"""Answer domain service."""

from typing import List

import logfire

from qna.domain.model.answer import Answer
from qna.domain.repository import AnswerRepository
from qna.domain.value import QuestionId

from .base import Service


class AnswerService(Service):
    """Domain service for answer operations.

    Does not verify that the owning question exists; callers do.
    """

    def __init__(self, answer_repository: AnswerRepository) -> None:
        self.answer_repository = answer_repository

    async def get_answers(self, question_id: QuestionId) -> List[Answer]:
        """Get the answers of a question."""
        with logfire.span("answer_service.get_answers", question_id=str(question_id)):
            answers = await self.answer_repository.list_by_question(question_id)
            logfire.info(
                "Answers listed", question_id=str(question_id), count=len(answers)
            )
            return answers

    async def add_answer(self, answer: Answer) -> Answer:
        """Add an answer."""
        with logfire.span(
            "answer_service.add_answer", question_id=str(answer.question_id)
        ):
            saved = await self.answer_repository.insert(answer)
            logfire.info(
                "Answer added",
                answer_id=str(saved.id),
                question_id=str(saved.question_id),
            )
            return saved

    async def update_answers(self, question_id: QuestionId, answer: Answer) -> int:
        """Replace the content of a question's answers.

        Raises:
            AnswerNotFoundError: If the question has no answers
        """
        with logfire.span(
            "answer_service.update_answers", question_id=str(question_id)
        ):
            updated = await self.answer_repository.update_by_question(
                question_id, answer
            )
            logfire.info(
                "Answers updated", question_id=str(question_id), count=updated
            )
            return updated

    async def delete_answers(self, question_id: QuestionId) -> int:
        """Delete a question's answers.

        Raises:
            AnswerNotFoundError: If the question has no answers
        """
        with logfire.span(
            "answer_service.delete_answers", question_id=str(question_id)
        ):
            deleted = await self.answer_repository.delete_by_question(question_id)
            logfire.info(
                "Answers deleted", question_id=str(question_id), count=deleted
            )
            return deleted
