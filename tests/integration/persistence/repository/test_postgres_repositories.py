"""Integration tests for the PostgreSQL repositories.

Run with QNA_INTEGRATION=1 against a migrated database (see DATABASE__URL).
"""

import pytest
import pytest_asyncio
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from qna.domain.error import (
    AnswerNotFoundError,
    DuplicateIdentifierError,
    QuestionNotFoundError,
)
from qna.domain.model import Account, Answer
from qna.domain.repository import (
    AccountRepository,
    AnswerRepository,
    QuestionRepository,
)
from qna.domain.value import QuestionId
from tests.conftest import make_question
from tests.harness import create_env_fixture, requires_postgres

pytestmark = requires_postgres

# Integration test fixture - real persistence
integration_env = create_env_fixture(unmock={"persistence"})


@pytest_asyncio.fixture
async def db_env(integration_env):
    """Request container over empty tables."""
    session = await integration_env.get(AsyncSession)
    await session.execute(
        text("TRUNCATE answers, questions, accounts RESTART IDENTITY CASCADE")
    )
    return integration_env


class TestPostgresQuestionRepository:
    """Integration tests for PostgresQuestionRepository."""

    @pytest.mark.asyncio
    async def test_insert_and_get(self, db_env, rust_question):
        repo = await db_env.get(QuestionRepository)

        await repo.insert(rust_question)

        assert await repo.get(QuestionId(1)) == rust_question

    @pytest.mark.asyncio
    async def test_duplicate_id_keeps_transaction_usable(self, db_env, rust_question):
        repo = await db_env.get(QuestionRepository)
        await repo.insert(rust_question)

        with pytest.raises(DuplicateIdentifierError):
            await repo.insert(rust_question)

        assert len(await repo.list_all()) == 1

    @pytest.mark.asyncio
    async def test_serial_ids_skip_caller_supplied_ids(self, db_env):
        repo = await db_env.get(QuestionRepository)
        await repo.insert(make_question(5))

        saved = await repo.insert(make_question(None))

        assert saved.id == QuestionId(6)

    @pytest.mark.asyncio
    async def test_list_range(self, db_env):
        repo = await db_env.get(QuestionRepository)
        for i in (1, 2, 9, 10):
            await repo.insert(make_question(i))

        result = await repo.list_range(QuestionId(2), QuestionId(9))

        assert [q.id.root for q in result] == [2, 9]

    @pytest.mark.asyncio
    async def test_empty_tags_stored_as_null(self, db_env):
        repo = await db_env.get(QuestionRepository)

        await repo.insert(make_question(1, tags=[]))

        assert (await repo.get(QuestionId(1))).tags is None

    @pytest.mark.asyncio
    async def test_update_and_delete_missing(self, db_env):
        repo = await db_env.get(QuestionRepository)

        with pytest.raises(QuestionNotFoundError):
            await repo.update(QuestionId(1), make_question(1))
        with pytest.raises(QuestionNotFoundError):
            await repo.delete(QuestionId(1))

    @pytest.mark.asyncio
    async def test_exists(self, db_env, rust_question):
        repo = await db_env.get(QuestionRepository)
        await repo.insert(rust_question)

        assert await repo.exists(QuestionId(1)) is True
        assert await repo.exists(QuestionId(2)) is False


class TestPostgresAnswerAndAccountRepositories:
    """Integration tests for answers and accounts."""

    @pytest.mark.asyncio
    async def test_answers_by_question(self, db_env, rust_question):
        question_repo = await db_env.get(QuestionRepository)
        answer_repo = await db_env.get(AnswerRepository)
        await question_repo.insert(rust_question)

        await answer_repo.insert(Answer(content="a", question_id=QuestionId(1)))
        updated = await answer_repo.update_by_question(
            QuestionId(1), Answer(content="b", question_id=QuestionId(1))
        )

        assert updated == 1
        answers = await answer_repo.list_by_question(QuestionId(1))
        assert [a.content for a in answers] == ["b"]
        assert await answer_repo.delete_by_question(QuestionId(1)) == 1
        with pytest.raises(AnswerNotFoundError):
            await answer_repo.delete_by_question(QuestionId(1))

    @pytest.mark.asyncio
    async def test_accounts_by_email(self, db_env):
        repo = await db_env.get(AccountRepository)

        saved = await repo.insert(Account(email="a@example.com", password="pw"))

        assert saved.id is not None
        assert (await repo.get_by_email("a@example.com")).id == saved.id
        with pytest.raises(DuplicateIdentifierError):
            await repo.insert(Account(email="a@example.com", password="pw"))
