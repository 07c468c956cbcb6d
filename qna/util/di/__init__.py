"""Dependency injection module."""

from typing import Type

from qna.util.di.application import ApplicationProvider
from qna.util.di.base import COMPONENTS, Component, ProviderBase
from qna.util.di.core import ConfigProvider
from qna.util.di.domain import DomainProvider
from qna.util.di.infrastructure import (
    LocalPersistenceProvider,
    LocalProfanityProvider,
    PersistenceProvider,
    ProdPersistenceProvider,
    ProdProfanityProvider,
    ProfanityProvider,
)
from qna.util.error import DependencyInjectionError

# Single list - all providers treated uniformly
PROVIDERS: list[Type[ProviderBase]] = [
    # Core providers (not swappable)
    ConfigProvider,
    DomainProvider,
    ApplicationProvider,
    # Infrastructure components (production or local)
    PersistenceProvider,
    ProfanityProvider,
]


def get_provider(
    base: Type[ProviderBase], use_local: bool = False
) -> Type[ProviderBase]:
    """Get appropriate provider class.

    - No subclasses: Concrete provider, use directly
    - Has subclasses: Swappable component, select by __is_local__ flag

    Args:
        base: Provider base class
        use_local: Whether to use the local implementation

    Returns:
        Provider class (not instantiated)

    Raises:
        DependencyInjectionError: If requested implementation not found
    """
    subclasses = base.__subclasses__()

    if not subclasses:
        return base

    impl = next(
        (c for c in subclasses if getattr(c, "__is_local__", False) == use_local),
        None,
    )

    if not impl:
        kind = "local" if use_local else "production"
        component_name = getattr(base, "__component__", base.__name__)
        raise DependencyInjectionError(f"No {kind} implementation for {component_name}")

    return impl


__all__ = [
    "Component",
    "COMPONENTS",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    # Core providers
    "ConfigProvider",
    "DomainProvider",
    "ApplicationProvider",
    # Infrastructure base classes
    "PersistenceProvider",
    "ProfanityProvider",
    # Infrastructure implementations
    "LocalPersistenceProvider",
    "LocalProfanityProvider",
    "ProdPersistenceProvider",
    "ProdProfanityProvider",
]
