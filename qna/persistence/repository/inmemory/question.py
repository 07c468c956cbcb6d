"""In-memory question repository."""

from collections.abc import Iterable
from typing import List

from qna.domain.error import DuplicateIdentifierError, QuestionNotFoundError
from qna.domain.model.question import Question
from qna.domain.repository.question import QuestionRepository
from qna.domain.value import QuestionId
from qna.persistence.repository.inmemory.common import next_identifier
from qna.util.lock import ReadWriteLock


class InMemoryQuestionRepository(QuestionRepository):
    """In-memory implementation of QuestionRepository.

    One instance owns one collection. Reads share the collection lock, writes
    hold it exclusively; no write awaits anything while holding it.
    """

    def __init__(self, questions: Iterable[Question] = ()) -> None:
        self._questions: dict[QuestionId, Question] = {}
        self._lock = ReadWriteLock()
        for question in questions:
            self._insert_locked(question)

    async def get(self, question_id: QuestionId) -> Question:
        """Get a question by ID."""
        async with self._lock.reader():
            question = self._questions.get(question_id)
        if question is None:
            raise QuestionNotFoundError(question_id)
        return question

    async def list_all(self) -> List[Question]:
        """Snapshot of every question, ordered by identifier."""
        async with self._lock.reader():
            questions = list(self._questions.values())
        return sorted(questions, key=lambda q: q.id)

    async def list_range(self, start: QuestionId, end: QuestionId) -> List[Question]:
        """Questions with start <= id <= end, found by a linear scan."""
        async with self._lock.reader():
            questions = [
                question
                for question_id, question in self._questions.items()
                if start <= question_id <= end
            ]
        return sorted(questions, key=lambda q: q.id)

    async def insert(self, question: Question) -> Question:
        """Insert a question, assigning the next identifier when absent."""
        async with self._lock.writer():
            return self._insert_locked(question)

    async def update(self, question_id: QuestionId, question: Question) -> Question:
        """Replace the question stored under question_id."""
        async with self._lock.writer():
            if question_id not in self._questions:
                raise QuestionNotFoundError(question_id)
            stored = question.with_id(question_id)
            self._questions[question_id] = stored
            return stored

    async def delete(self, question_id: QuestionId) -> None:
        """Delete a question."""
        async with self._lock.writer():
            if self._questions.pop(question_id, None) is None:
                raise QuestionNotFoundError(question_id)

    async def exists(self, question_id: QuestionId) -> bool:
        """Whether a question with this identifier is stored."""
        async with self._lock.reader():
            return question_id in self._questions

    def _insert_locked(self, question: Question) -> Question:
        if question.id is None:
            question = question.with_id(next_identifier(QuestionId, self._questions))
        elif question.id in self._questions:
            raise DuplicateIdentifierError("Question", question.id)
        self._questions[question.id] = question
        return question
