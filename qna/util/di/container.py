"""Dependency injection container."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
import logfire

from qna.config import Settings
from qna.util.di import PROVIDERS, Component, get_provider


def local_components(settings: Settings) -> set[Component]:
    """Components that run in-process under the given settings.

    Persistence is local for the memory backend; the profanity filter is
    local when no API key is configured.
    """
    local: set[Component] = set()
    if settings.storage.backend == "memory":
        local.add("persistence")
    if not settings.profanity.api_key:
        local.add("profanity")
    return local


def create_container(settings: Settings) -> AsyncContainer:
    """Build the application container.

    Args:
        settings: Application settings, exposed to providers as context

    Returns:
        Configured DI container
    """
    local = local_components(settings)
    provider_instances = [
        get_provider(base, use_local=getattr(base, "__component__", None) in local)()
        for base in PROVIDERS
    ]
    logfire.info(
        "DI container created",
        storage_backend=settings.storage.backend,
        local_components=sorted(local),
    )
    # Include FastapiProvider for proper integration with FastAPI
    return make_async_container(
        *provider_instances, FastapiProvider(), context={Settings: settings}
    )


def setup_di(app, container: AsyncContainer) -> None:
    """Setup dependency injection for FastAPI.

    Args:
        app: FastAPI application
        container: DI container
    """
    setup_dishka(container, app)
