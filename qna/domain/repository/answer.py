"""Answer repository interface."""

from abc import ABC, abstractmethod
from typing import List

from qna.domain.model.answer import Answer
from qna.domain.value import AnswerId, QuestionId


class AnswerRepository(ABC):
    """Store for the answer collection.

    Answers are stored under their own identifier, but the HTTP surface
    addresses them through the identifier of the question they belong to.
    The repository never checks that the owning question exists.
    """

    @abstractmethod
    async def get(self, answer_id: AnswerId) -> Answer:
        """Get an answer by ID.

        Raises:
            AnswerNotFoundError: If no answer has this identifier
        """
        pass

    @abstractmethod
    async def list_all(self) -> List[Answer]:
        """Snapshot of every answer, ordered by identifier."""
        pass

    @abstractmethod
    async def list_by_question(self, question_id: QuestionId) -> List[Answer]:
        """Answers belonging to a question, ordered by identifier.

        Returns an empty list when the question has no answers.
        """
        pass

    @abstractmethod
    async def insert(self, answer: Answer) -> Answer:
        """Insert a new answer, assigning an identifier when absent.

        Raises:
            DuplicateIdentifierError: If a supplied identifier is already taken
        """
        pass

    @abstractmethod
    async def update_by_question(self, question_id: QuestionId, answer: Answer) -> int:
        """Replace the content of every answer belonging to a question.

        Returns:
            Number of answers updated

        Raises:
            AnswerNotFoundError: If the question has no answers
        """
        pass

    @abstractmethod
    async def delete_by_question(self, question_id: QuestionId) -> int:
        """Delete every answer belonging to a question.

        Returns:
            Number of answers deleted

        Raises:
            AnswerNotFoundError: If the question has no answers
        """
        pass
