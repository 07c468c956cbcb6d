"""Unit tests for InMemoryQuestionRepository."""

import asyncio

import pytest

from qna.domain.error import (
    DuplicateIdentifierError,
    QuestionNotFoundError,
    StorageError,
)
from qna.domain.value import MAX_IDENTIFIER, QuestionId
from qna.persistence.repository.inmemory import InMemoryQuestionRepository
from tests.conftest import make_question


class TestInsertAndGet:
    """Tests for insert and get."""

    @pytest.mark.asyncio
    async def test_inserted_question_is_returned_unchanged(self, rust_question):
        repo = InMemoryQuestionRepository()

        await repo.insert(rust_question)

        assert await repo.get(QuestionId(1)) == rust_question

    @pytest.mark.asyncio
    async def test_duplicate_id_rejected_and_original_kept(self, rust_question):
        repo = InMemoryQuestionRepository([rust_question])

        with pytest.raises(DuplicateIdentifierError):
            await repo.insert(make_question(1, title="Other"))

        assert (await repo.get(QuestionId(1))).title == "What is Rust?"

    @pytest.mark.asyncio
    async def test_assigns_next_id_when_absent(self):
        repo = InMemoryQuestionRepository([make_question(7)])

        saved = await repo.insert(make_question(None))

        assert saved.id == QuestionId(8)
        assert await repo.get(QuestionId(8)) == saved

    @pytest.mark.asyncio
    async def test_assigns_first_id_in_empty_store(self):
        repo = InMemoryQuestionRepository()

        saved = await repo.insert(make_question(None))

        assert saved.id == QuestionId(1)

    @pytest.mark.asyncio
    async def test_no_identifier_left_after_maximum(self):
        repo = InMemoryQuestionRepository([make_question(MAX_IDENTIFIER)])

        with pytest.raises(StorageError):
            await repo.insert(make_question(None))

    @pytest.mark.asyncio
    async def test_get_missing_raises(self):
        repo = InMemoryQuestionRepository()

        with pytest.raises(QuestionNotFoundError):
            await repo.get(QuestionId(1))


class TestListRange:
    """Tests for list_range."""

    @pytest.mark.asyncio
    async def test_range_matches_filtered_list_all(self):
        repo = InMemoryQuestionRepository(
            [make_question(i, title=f"Q{i}") for i in (12, 3, 9, 1, 10)]
        )

        in_range = await repo.list_range(QuestionId(3), QuestionId(10))
        everything = await repo.list_all()

        assert in_range == [
            q for q in everything if QuestionId(3) <= q.id <= QuestionId(10)
        ]
        assert [q.id.root for q in in_range] == [3, 9, 10]

    @pytest.mark.asyncio
    async def test_range_independent_of_insertion_order(self):
        forward = InMemoryQuestionRepository([make_question(i) for i in range(1, 6)])
        backward = InMemoryQuestionRepository(
            [make_question(i) for i in range(5, 0, -1)]
        )

        assert await forward.list_range(QuestionId(2), QuestionId(4)) == (
            await backward.list_range(QuestionId(2), QuestionId(4))
        )

    @pytest.mark.asyncio
    async def test_numeric_ordering(self):
        repo = InMemoryQuestionRepository([make_question(i) for i in (2, 9, 10, 11)])

        result = await repo.list_range(QuestionId(9), QuestionId(10))

        assert [q.id.root for q in result] == [9, 10]

    @pytest.mark.asyncio
    async def test_empty_when_none_qualify(self):
        repo = InMemoryQuestionRepository([make_question(1)])

        assert await repo.list_range(QuestionId(2), QuestionId(5)) == []

    @pytest.mark.asyncio
    async def test_inverted_bounds_give_empty_list(self):
        repo = InMemoryQuestionRepository([make_question(i) for i in range(1, 5)])

        assert await repo.list_range(QuestionId(4), QuestionId(1)) == []


class TestUpdate:
    """Tests for update."""

    @pytest.mark.asyncio
    async def test_full_replace(self, rust_question):
        repo = InMemoryQuestionRepository([rust_question])

        await repo.update(
            QuestionId(1), make_question(1, title="New", content="Body", tags=None)
        )

        stored = await repo.get(QuestionId(1))
        assert stored.title == "New"
        assert stored.content == "Body"
        assert stored.tags is None

    @pytest.mark.asyncio
    async def test_stored_record_keeps_target_id(self, rust_question):
        repo = InMemoryQuestionRepository([rust_question])

        stored = await repo.update(QuestionId(1), make_question(99, title="New"))

        assert stored.id == QuestionId(1)
        with pytest.raises(QuestionNotFoundError):
            await repo.get(QuestionId(99))

    @pytest.mark.asyncio
    async def test_update_missing_raises_and_changes_nothing(self, rust_question):
        repo = InMemoryQuestionRepository([rust_question])

        with pytest.raises(QuestionNotFoundError):
            await repo.update(QuestionId(2), make_question(2))

        assert await repo.list_all() == [rust_question]


class TestDelete:
    """Tests for delete."""

    @pytest.mark.asyncio
    async def test_second_delete_raises(self, rust_question):
        repo = InMemoryQuestionRepository([rust_question])

        await repo.delete(QuestionId(1))

        with pytest.raises(QuestionNotFoundError):
            await repo.delete(QuestionId(1))

    @pytest.mark.asyncio
    async def test_delete_missing_changes_nothing(self, rust_question):
        repo = InMemoryQuestionRepository([rust_question])

        with pytest.raises(QuestionNotFoundError):
            await repo.delete(QuestionId(5))

        assert await repo.list_all() == [rust_question]


class TestConcurrency:
    """Concurrent access to one collection."""

    @pytest.mark.asyncio
    async def test_concurrent_inserts_with_distinct_ids_all_succeed(self):
        repo = InMemoryQuestionRepository()
        count = 100

        await asyncio.gather(
            *(repo.insert(make_question(i, title=f"Q{i}")) for i in range(1, count + 1))
        )

        questions = await repo.list_all()
        assert len(questions) == count
        assert {q.id.root for q in questions} == set(range(1, count + 1))

    @pytest.mark.asyncio
    async def test_concurrent_assigned_ids_are_unique(self):
        repo = InMemoryQuestionRepository()

        saved = await asyncio.gather(*(repo.insert(make_question(None)) for _ in range(20)))

        assert len({q.id for q in saved}) == 20

    @pytest.mark.asyncio
    async def test_reads_interleaved_with_writes_see_whole_records(self):
        repo = InMemoryQuestionRepository([make_question(1, title="v0")])

        async def write(version: int):
            await repo.update(QuestionId(1), make_question(1, title=f"v{version}"))

        async def read():
            return await repo.get(QuestionId(1))

        results = await asyncio.gather(
            *(write(i) if i % 2 else read() for i in range(1, 21))
        )

        titles = {r.title for r in results if r is not None}
        assert all(title.startswith("v") for title in titles)
        assert (await repo.get(QuestionId(1))).title == "v19"


class TestScenario:
    """Insert, range query and delete of a single question."""

    @pytest.mark.asyncio
    async def test_rust_question_lifecycle(self):
        repo = InMemoryQuestionRepository()
        question = make_question(1, title="What is Rust?", tags=["rust"])

        await repo.insert(question)

        assert await repo.list_range(QuestionId(1), QuestionId(1)) == [question]
        assert await repo.list_range(QuestionId(2), QuestionId(5)) == []

        await repo.delete(QuestionId(1))

        with pytest.raises(QuestionNotFoundError):
            await repo.get(QuestionId(1))


class TestExists:
    """Tests for exists."""

    @pytest.mark.asyncio
    async def test_exists_follows_insert_and_delete(self, rust_question):
        repo = InMemoryQuestionRepository()

        assert await repo.exists(QuestionId(1)) is False

        await repo.insert(rust_question)
        assert await repo.exists(QuestionId(1)) is True

        await repo.delete(QuestionId(1))
        assert await repo.exists(QuestionId(1)) is False
