"""Test harness for unit and integration tests.

Integration tests need a running Postgres reachable through DATABASE__URL
with the Alembic migrations applied.
"""

import os

import pytest
import pytest_asyncio

from qna.config import Settings
from qna.util.di import Component
from tests.di import build_test_container

requires_postgres = pytest.mark.skipif(
    os.environ.get("QNA_INTEGRATION") != "1",
    reason="set QNA_INTEGRATION=1 to run tests against Postgres",
)


def create_env_fixture(
    unmock: set[Component] | None = None, settings: Settings | None = None
):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that:
    - Builds a test container with specified unmocking
    - Yields request-scoped container for service access

    Args:
        unmock: Components to use production implementations for
        settings: Optional settings override

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        unit_env = create_env_fixture()

        @pytest.mark.asyncio
        async def test_add_question(unit_env):
            service = await unit_env.get(QuestionService)
            ...
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set(), settings=settings)

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment
