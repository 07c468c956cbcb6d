"""In-memory answer repository."""

from typing import List

from qna.domain.error import AnswerNotFoundError, DuplicateIdentifierError
from qna.domain.model.answer import Answer
from qna.domain.repository.answer import AnswerRepository
from qna.domain.value import AnswerId, QuestionId
from qna.persistence.repository.inmemory.common import next_identifier
from qna.util.lock import ReadWriteLock


class InMemoryAnswerRepository(AnswerRepository):
    """In-memory implementation of AnswerRepository."""

    def __init__(self) -> None:
        self._answers: dict[AnswerId, Answer] = {}
        self._lock = ReadWriteLock()

    async def get(self, answer_id: AnswerId) -> Answer:
        """Get an answer by ID."""
        async with self._lock.reader():
            answer = self._answers.get(answer_id)
        if answer is None:
            raise AnswerNotFoundError(answer_id)
        return answer

    async def list_all(self) -> List[Answer]:
        """Snapshot of every answer."""
        async with self._lock.reader():
            answers = list(self._answers.values())
        return sorted(answers, key=lambda a: a.id)

    async def list_by_question(self, question_id: QuestionId) -> List[Answer]:
        """Answers belonging to a question."""
        async with self._lock.reader():
            answers = [a for a in self._answers.values() if a.question_id == question_id]
        return sorted(answers, key=lambda a: a.id)

    async def insert(self, answer: Answer) -> Answer:
        """Insert an answer, assigning the next identifier when absent."""
        async with self._lock.writer():
            if answer.id is None:
                answer = answer.with_id(next_identifier(AnswerId, self._answers))
            elif answer.id in self._answers:
                raise DuplicateIdentifierError("Answer", answer.id)
            self._answers[answer.id] = answer
            return answer

    async def update_by_question(self, question_id: QuestionId, answer: Answer) -> int:
        """Replace the content of every answer of a question."""
        async with self._lock.writer():
            matching = [
                answer_id
                for answer_id, stored in self._answers.items()
                if stored.question_id == question_id
            ]
            if not matching:
                raise AnswerNotFoundError(question_id)
            for answer_id in matching:
                self._answers[answer_id] = Answer(
                    id=answer_id, content=answer.content, question_id=question_id
                )
            return len(matching)

    async def delete_by_question(self, question_id: QuestionId) -> int:
        """Delete every answer of a question."""
        async with self._lock.writer():
            matching = [
                answer_id
                for answer_id, stored in self._answers.items()
                if stored.question_id == question_id
            ]
            if not matching:
                raise AnswerNotFoundError(question_id)
            for answer_id in matching:
                del self._answers[answer_id]
            return len(matching)
