"""PostgreSQL implementation of Answer repository."""

from typing import List

from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from qna.domain.error import AnswerNotFoundError, DuplicateIdentifierError
from qna.domain.model import Answer
from qna.domain.repository import AnswerRepository
from qna.domain.value import AnswerId, QuestionId
from qna.persistence.mappers import answer_to_dict, row_to_answer
from qna.persistence.repository.common import storage_errors
from qna.persistence.tables import answers_table


class PostgresAnswerRepository(AnswerRepository):
    """PostgreSQL implementation of AnswerRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def get(self, answer_id: AnswerId) -> Answer:
        """Get an answer by ID."""
        stmt = select(answers_table).where(answers_table.c.id == answer_id.root)
        with storage_errors("answer.get"):
            result = await self.session.execute(stmt)
            row = result.fetchone()
        if row is None:
            raise AnswerNotFoundError(answer_id)
        return row_to_answer(row._asdict())

    async def list_all(self) -> List[Answer]:
        """Get every answer ordered by ID."""
        stmt = select(answers_table).order_by(answers_table.c.id)
        with storage_errors("answer.list_all"):
            result = await self.session.execute(stmt)
            return [row_to_answer(row._asdict()) for row in result.fetchall()]

    async def list_by_question(self, question_id: QuestionId) -> List[Answer]:
        """Get the answers of a question."""
        stmt = (
            select(answers_table)
            .where(answers_table.c.corresponding_question == question_id.root)
            .order_by(answers_table.c.id)
        )
        with storage_errors("answer.list_by_question"):
            result = await self.session.execute(stmt)
            return [row_to_answer(row._asdict()) for row in result.fetchall()]

    async def insert(self, answer: Answer) -> Answer:
        """Insert an answer."""
        stmt = insert(answers_table).values(**answer_to_dict(answer)).returning(
            answers_table
        )
        with storage_errors("answer.insert"):
            try:
                async with self.session.begin_nested():
                    result = await self.session.execute(stmt)
                    row = result.fetchone()
            except IntegrityError as e:
                raise DuplicateIdentifierError("Answer", answer.id) from e
        return row_to_answer(row._asdict())

    async def update_by_question(self, question_id: QuestionId, answer: Answer) -> int:
        """Replace the content of every answer of a question."""
        stmt = (
            update(answers_table)
            .where(answers_table.c.corresponding_question == question_id.root)
            .values(content=answer.content)
            .returning(answers_table.c.id)
        )
        with storage_errors("answer.update_by_question"):
            result = await self.session.execute(stmt)
            updated = len(result.fetchall())
        if updated == 0:
            raise AnswerNotFoundError(question_id)
        return updated

    async def delete_by_question(self, question_id: QuestionId) -> int:
        """Delete every answer of a question."""
        stmt = (
            delete(answers_table)
            .where(answers_table.c.corresponding_question == question_id.root)
            .returning(answers_table.c.id)
        )
        with storage_errors("answer.delete_by_question"):
            result = await self.session.execute(stmt)
            deleted = len(result.fetchall())
        if deleted == 0:
            raise AnswerNotFoundError(question_id)
        return deleted
