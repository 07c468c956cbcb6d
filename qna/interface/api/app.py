"""FastAPI application."""

from contextlib import asynccontextmanager

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.ext.asyncio import AsyncEngine

from qna.config import Settings
from qna.domain.repository import QuestionRepository
from qna.interface.api.errors import register_error_handlers
from qna.interface.api.routes import accounts, answers, auth, health, questions
from qna.util.di.container import create_container, setup_di
from qna.util.observability import instrument_fastapi, instrument_httpx

CORS_ORIGINS = ["http://localhost:8080"]
CORS_METHODS = ["GET", "POST"]
CORS_HEADERS = ["Content-Type"]
CORS_MAX_AGE = 600


@asynccontextmanager
async def lifespan(app: FastAPI):
    container: AsyncContainer = app.state.dishka_container
    settings = await container.get(Settings)
    # Fail the boot on an unreadable seed file or unreachable database
    if settings.storage.backend == "memory":
        await container.get(QuestionRepository)
    else:
        await container.get(AsyncEngine)
    yield
    # Dispose the engine and close the profanity HTTP client
    await container.close()


def create_app(
    settings: Settings | None = None, container: AsyncContainer | None = None
) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        settings: Application settings; loaded from the environment when omitted
        container: DI container; built from ``settings`` when omitted
    """
    settings = settings or Settings()

    # Instrument httpx for outbound profanity API requests
    instrument_httpx()

    app_instance = FastAPI(
        title="Q&A API",
        description="Questions, answers and accounts service",
        version="0.1.0",
        lifespan=lifespan,
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=CORS_METHODS,
        allow_headers=CORS_HEADERS,
        max_age=CORS_MAX_AGE,
    )

    setup_di(app_instance, container or create_container(settings))

    register_error_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(questions.router)
    app_instance.include_router(answers.router)
    app_instance.include_router(accounts.router)
    app_instance.include_router(auth.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
app = create_app()
