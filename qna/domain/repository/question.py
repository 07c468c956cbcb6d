"""Question repository interface."""

from abc import ABC, abstractmethod
from typing import List

from qna.domain.error import QuestionNotFoundError
from qna.domain.model.question import Question
from qna.domain.value import QuestionId


class QuestionRepository(ABC):
    """Store for the question collection.

    All mutation and retrieval of questions passes through a repository.
    Existence checks and the mutation they guard happen against one atomic
    view of the collection.
    """

    @abstractmethod
    async def get(self, question_id: QuestionId) -> Question:
        """Get a question by ID.

        Args:
            question_id: The question's identifier

        Returns:
            The stored question

        Raises:
            QuestionNotFoundError: If no question has this identifier
        """
        pass

    @abstractmethod
    async def list_all(self) -> List[Question]:
        """Snapshot of every question, ordered by identifier."""
        pass

    @abstractmethod
    async def list_range(self, start: QuestionId, end: QuestionId) -> List[Question]:
        """Questions whose identifier lies in the inclusive range [start, end].

        Identifiers compare numerically. An empty list is returned when no
        identifier qualifies (including when start > end).

        Args:
            start: Lower bound (inclusive)
            end: Upper bound (inclusive)

        Returns:
            Matching questions ordered by identifier
        """
        pass

    @abstractmethod
    async def insert(self, question: Question) -> Question:
        """Insert a new question.

        When ``question.id`` is None the store assigns the next identifier.

        Args:
            question: The question to insert

        Returns:
            The stored question (with its identifier)

        Raises:
            DuplicateIdentifierError: If the identifier is already taken
        """
        pass

    @abstractmethod
    async def update(self, question_id: QuestionId, question: Question) -> Question:
        """Replace the whole question stored under ``question_id``.

        Fields absent from ``question`` are lost; the body identifier is ignored.

        Returns:
            The stored question

        Raises:
            QuestionNotFoundError: If no question has this identifier
        """
        pass

    @abstractmethod
    async def delete(self, question_id: QuestionId) -> None:
        """Delete a question (answers are left untouched).

        Raises:
            QuestionNotFoundError: If no question has this identifier
        """
        pass

    async def exists(self, question_id: QuestionId) -> bool:
        """Whether a question with this identifier is currently stored."""
        try:
            await self.get(question_id)
        except QuestionNotFoundError:
            return False
        return True
