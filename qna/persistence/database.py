"""Engine and session setup for the postgres backend."""

import logfire
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from qna.config import DatabaseSettings
from qna.util.error import ConfigurationError


def create_engine(database: DatabaseSettings, echo: bool = False) -> AsyncEngine:
    """Create the async engine backing every postgres repository.

    Args:
        database: Connection URL and pool sizing
        echo: Log emitted SQL
    """
    return create_async_engine(
        database.url,
        echo=echo,
        pool_pre_ping=True,
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
    )


async def check_connection(engine: AsyncEngine) -> None:
    """Open one connection so a wrong URL fails before requests are served.

    Raises:
        ConfigurationError: If the database cannot be reached
    """
    try:
        async with engine.connect() as connection:
            await connection.execute(text("SELECT 1"))
    except (SQLAlchemyError, OSError) as e:
        logfire.error("Database unreachable", error=str(e))
        raise ConfigurationError(f"Database unreachable: {e}") from e
    logfire.info("Database connection checked")


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # One session per request; records are pydantic models, so nothing to expire
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
