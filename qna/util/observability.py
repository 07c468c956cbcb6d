"""Logfire setup for the qna service.

Services report through logfire directly:

    with logfire.span("question_service.add_question", question_id=str(question.id)):
        ...
    logfire.info("Question added", question_id=str(saved.id))
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from qna.config import Settings

SERVICE_NAME = "qna"
SERVICE_VERSION = "0.1.0"

# Attribute names holding login secrets or account passwords
SCRUBBED_FIELDS = ["client_secret", "access_token", "password"]


def _should_send(settings: Settings) -> bool:
    explicit = settings.observability.send_to_logfire
    if explicit is not None:
        return explicit
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure logfire once per process, before the app is imported."""
    send_to_logfire = _should_send(settings)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=SERVICE_VERSION,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=settings.observability.logfire_token,
        scrubbing=logfire.ScrubbingOptions(extra_patterns=SCRUBBED_FIELDS),
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        storage_backend=settings.storage.backend,
        profanity_filter="apilayer" if settings.profanity.api_key else "passthrough",
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request except the health probe."""
    logfire.instrument_fastapi(
        app,
        # Authorization headers carry bearer tokens
        capture_headers=False,
        excluded_urls="/health",
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace statements issued by the postgres repositories."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)


def instrument_httpx() -> None:
    """Trace calls to the profanity service."""
    logfire.instrument_httpx()
