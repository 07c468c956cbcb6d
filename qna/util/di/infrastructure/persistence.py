"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from qna.config import Settings
from qna.domain.model import ClientCredential
from qna.domain.repository import (
    AccountRepository,
    AnswerRepository,
    CredentialRepository,
    QuestionRepository,
)
from qna.persistence.database import (
    check_connection,
    create_engine,
    create_session_factory,
)
from qna.persistence.repository import (
    PostgresAccountRepository,
    PostgresAnswerRepository,
    PostgresCredentialRepository,
    PostgresQuestionRepository,
)
from qna.persistence.repository.inmemory import (
    InMemoryAccountRepository,
    InMemoryAnswerRepository,
    InMemoryCredentialRepository,
    InMemoryQuestionRepository,
)
from qna.persistence.seed import load_seed_questions
from qna.util.di.base import ProviderBase
from qna.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_local__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine, disposed when the container closes."""
        engine = create_engine(settings.database, echo=settings.debug)
        instrument_sqlalchemy(engine)
        try:
            await check_connection(engine)
        except Exception:
            await engine.dispose()
            raise
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        The session is automatically committed at the end of the request
        if no exception occurred, or rolled back if an exception was raised.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
                logfire.info("Session committed")
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_question_repository(self, session: AsyncSession) -> QuestionRepository:
        """Provide Question repository."""
        return PostgresQuestionRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_answer_repository(self, session: AsyncSession) -> AnswerRepository:
        """Provide Answer repository."""
        return PostgresAnswerRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_account_repository(self, session: AsyncSession) -> AccountRepository:
        """Provide Account repository."""
        return PostgresAccountRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_credential_repository(
        self, session: AsyncSession
    ) -> CredentialRepository:
        """Provide Credential repository."""
        return PostgresCredentialRepository(session)


class LocalPersistenceProvider(PersistenceProvider):
    """Local persistence provider using in-memory repositories.

    Uses APP scope: every request of the process sees the same collections.
    """

    __is_local__ = True

    @provide(scope=Scope.APP)
    def get_question_repository(self, settings: Settings) -> QuestionRepository:
        """Provide in-memory question repository, seeded from the seed file if set."""
        seed_file = settings.storage.seed_file
        questions = load_seed_questions(seed_file) if seed_file else []
        return InMemoryQuestionRepository(questions)

    @provide(scope=Scope.APP)
    def get_answer_repository(self) -> AnswerRepository:
        """Provide in-memory answer repository."""
        return InMemoryAnswerRepository()

    @provide(scope=Scope.APP)
    def get_account_repository(self) -> AccountRepository:
        """Provide in-memory account repository."""
        return InMemoryAccountRepository()

    @provide(scope=Scope.APP)
    def get_credential_repository(self, settings: Settings) -> CredentialRepository:
        """Provide in-memory credential repository seeded from auth settings."""
        return InMemoryCredentialRepository(
            ClientCredential(**client.model_dump()) for client in settings.auth.clients
        )
