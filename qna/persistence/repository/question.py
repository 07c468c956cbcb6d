"""PostgreSQL implementation of Question repository."""

from typing import List

from sqlalchemy import delete, func, insert, select, text, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from qna.domain.error import DuplicateIdentifierError, QuestionNotFoundError
from qna.domain.model import Question
from qna.domain.repository import QuestionRepository
from qna.domain.value import QuestionId
from qna.persistence.mappers import question_to_dict, row_to_question
from qna.persistence.repository.common import storage_errors
from qna.persistence.tables import questions_table

# Keeps the serial sequence ahead of caller-supplied identifiers
_SYNC_SEQUENCE = text(
    "SELECT setval(pg_get_serial_sequence('questions', 'id'), "
    "GREATEST((SELECT MAX(id) FROM questions), 1))"
)


class PostgresQuestionRepository(QuestionRepository):
    """PostgreSQL implementation of QuestionRepository.

    Every mutation is a single statement inside the request transaction, so
    the existence check and the write see the same row.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def get(self, question_id: QuestionId) -> Question:
        """Get a question by ID."""
        stmt = select(questions_table).where(questions_table.c.id == question_id.root)
        with storage_errors("question.get"):
            result = await self.session.execute(stmt)
            row = result.fetchone()
        if row is None:
            raise QuestionNotFoundError(question_id)
        return row_to_question(row._asdict())

    async def list_all(self) -> List[Question]:
        """Get every question ordered by ID."""
        stmt = select(questions_table).order_by(questions_table.c.id)
        with storage_errors("question.list_all"):
            result = await self.session.execute(stmt)
            return [row_to_question(row._asdict()) for row in result.fetchall()]

    async def list_range(self, start: QuestionId, end: QuestionId) -> List[Question]:
        """Get questions with start <= id <= end."""
        stmt = (
            select(questions_table)
            .where(questions_table.c.id >= start.root)
            .where(questions_table.c.id <= end.root)
            .order_by(questions_table.c.id)
        )
        with storage_errors("question.list_range"):
            result = await self.session.execute(stmt)
            return [row_to_question(row._asdict()) for row in result.fetchall()]

    async def insert(self, question: Question) -> Question:
        """Insert a question; the serial column assigns the id when absent."""
        stmt = (
            insert(questions_table)
            .values(**question_to_dict(question))
            .returning(questions_table)
        )
        with storage_errors("question.insert"):
            try:
                async with self.session.begin_nested():
                    result = await self.session.execute(stmt)
                    row = result.fetchone()
            except IntegrityError as e:
                raise DuplicateIdentifierError("Question", question.id) from e

            if question.id is not None:
                await self.session.execute(_SYNC_SEQUENCE)

        return row_to_question(row._asdict())

    async def update(self, question_id: QuestionId, question: Question) -> Question:
        """Replace title, content and tags of a question."""
        values = question_to_dict(question)
        values.pop("id", None)
        stmt = (
            update(questions_table)
            .where(questions_table.c.id == question_id.root)
            .values(**values)
            .returning(questions_table)
        )
        with storage_errors("question.update"):
            result = await self.session.execute(stmt)
            row = result.fetchone()
        if row is None:
            raise QuestionNotFoundError(question_id)
        return row_to_question(row._asdict())

    async def delete(self, question_id: QuestionId) -> None:
        """Delete a question."""
        stmt = (
            delete(questions_table)
            .where(questions_table.c.id == question_id.root)
            .returning(questions_table.c.id)
        )
        with storage_errors("question.delete"):
            result = await self.session.execute(stmt)
            row = result.fetchone()
        if row is None:
            raise QuestionNotFoundError(question_id)

    async def exists(self, question_id: QuestionId) -> bool:
        """Whether a question with this ID exists."""
        stmt = (
            select(func.count())
            .select_from(questions_table)
            .where(questions_table.c.id == question_id.root)
        )
        with storage_errors("question.exists"):
            result = await self.session.execute(stmt)
            return (result.scalar() or 0) > 0
