"""Unit tests for provider selection and container wiring."""

import json

import pytest

from qna.adapter.profanity import ApiLayerProfanityFilter, PassthroughProfanityFilter
from qna.domain.repository import QuestionRepository
from qna.domain.service import ProfanityFilter
from qna.domain.value import QuestionId
from qna.persistence.repository.inmemory import InMemoryQuestionRepository
from qna.util.di import (
    COMPONENTS,
    PROVIDERS,
    ConfigProvider,
    LocalPersistenceProvider,
    PersistenceProvider,
    ProdPersistenceProvider,
    get_provider,
)
from qna.util.di.container import create_container, local_components
from tests.di import build_test_container, make_test_settings


class TestGetProvider:
    """Tests for get_provider."""

    def test_concrete_provider_returned_as_is(self):
        assert get_provider(ConfigProvider) is ConfigProvider

    def test_selects_local_implementation(self):
        assert get_provider(PersistenceProvider, use_local=True) is LocalPersistenceProvider

    def test_selects_production_implementation(self):
        assert get_provider(PersistenceProvider) is ProdPersistenceProvider

    def test_every_component_has_local_and_production(self):
        bases = [p for p in PROVIDERS if p.__component__ is not None]

        assert sorted(p.__component__ for p in bases) == sorted(COMPONENTS)
        for base in bases:
            assert get_provider(base, use_local=True).__is_local__ is True
            assert get_provider(base, use_local=False).__is_local__ is False


class TestLocalComponents:
    """Tests for local_components."""

    def test_memory_backend_without_api_key(self):
        assert local_components(make_test_settings()) == {"persistence", "profanity"}

    def test_postgres_backend_with_api_key(self):
        settings = make_test_settings(
            storage={"backend": "postgres"}, profanity={"api_key": "key"}
        )

        assert local_components(settings) == set()


class TestContainer:
    """Tests for the assembled containers."""

    @pytest.mark.asyncio
    async def test_memory_store_shared_between_requests(self):
        container = create_container(make_test_settings())

        async with container() as first:
            repo = await first.get(QuestionRepository)
        async with container() as second:
            assert await second.get(QuestionRepository) is repo

        assert isinstance(repo, InMemoryQuestionRepository)
        await container.close()

    @pytest.mark.asyncio
    async def test_seed_file_loaded_into_memory_store(self, tmp_path):
        seed = tmp_path / "questions.json"
        seed.write_text(json.dumps([{"id": 1, "title": "Seeded", "content": "c"}]))
        container = build_test_container(
            settings=make_test_settings(storage={"seed_file": str(seed)})
        )

        async with container() as request_container:
            repo = await request_container.get(QuestionRepository)
            assert (await repo.get(QuestionId(1))).title == "Seeded"

        await container.close()

    @pytest.mark.asyncio
    async def test_profanity_filter_follows_api_key(self):
        local = build_test_container()
        remote = build_test_container(
            unmock={"profanity"},
            settings=make_test_settings(profanity={"api_key": "key"}),
        )

        async with local() as request_container:
            assert isinstance(
                await request_container.get(ProfanityFilter), PassthroughProfanityFilter
            )
        async with remote() as request_container:
            assert isinstance(
                await request_container.get(ProfanityFilter), ApiLayerProfanityFilter
            )

        await local.close()
        await remote.close()

    def test_unknown_component_rejected(self):
        with pytest.raises(ValueError):
            build_test_container(unmock={"mailer"})
