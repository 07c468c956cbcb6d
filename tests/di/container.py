"""Test container builder with selective unmocking."""

from dishka import AsyncContainer, make_async_container

from qna.config import Settings
from qna.util.di import COMPONENTS, PROVIDERS, Component, get_provider


def make_test_settings(**overrides) -> Settings:
    """Settings for tests: memory backend, no profanity key, fixed JWT secret."""
    values = {
        "environment": "test",
        "auth": {
            "jwt_secret": "test-secret",
            "clients": [
                {
                    "client_id": "test-client",
                    "client_secret": "test-secret-value",
                    "full_name": "Test Client",
                    "email": "client@example.com",
                }
            ],
        },
    }
    values.update(overrides)
    return Settings(**values)


def build_test_container(
    unmock: set[Component] | None = None, settings: Settings | None = None
) -> AsyncContainer:
    """Build test container with selective unmocking.

    Args:
        unmock: Components to use production implementations for.
                All others use their local implementations.
        settings: Settings passed as container context (test settings by default)

    Returns:
        Configured test container

    Raises:
        ValueError: If unknown components are requested

    Examples:
        # Unit tests - in-memory stores, pass-through profanity filter
        container = build_test_container()

        # Integration tests - real persistence (requires Postgres)
        container = build_test_container(unmock={"persistence"})
    """
    unmock = unmock or set()
    _validate_unmock(unmock)

    provider_instances = []
    for base in PROVIDERS:
        component_name = getattr(base, "__component__", None)
        use_local = component_name is not None and component_name not in unmock
        provider_instances.append(get_provider(base, use_local=use_local)())

    return make_async_container(
        *provider_instances, context={Settings: settings or make_test_settings()}
    )


def _validate_unmock(unmock: set[Component]) -> None:
    """Validate unmock configuration.

    Raises:
        ValueError: If unknown components are requested
    """
    unknown = unmock - set(COMPONENTS)
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")
