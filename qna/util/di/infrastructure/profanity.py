"""Profanity filter infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide

from qna.adapter.profanity import ApiLayerProfanityFilter, PassthroughProfanityFilter
from qna.config import ProfanitySettings
from qna.domain.service import ProfanityFilter
from qna.util.di.base import ProviderBase
from qna.util.error import ConfigurationError


class ProfanityProvider(ProviderBase):
    """Profanity component base."""

    __component__ = "profanity"


class ProdProfanityProvider(ProfanityProvider):
    """Production profanity provider calling the APILayer API."""

    __is_local__ = False

    @provide(scope=Scope.APP)
    async def get_profanity_filter(
        self, settings: ProfanitySettings
    ) -> AsyncIterator[ProfanityFilter]:
        """Provide the remote filter; its HTTP client closes with the container.

        Raises:
            ConfigurationError: If no API key is configured
        """
        if not settings.api_key:
            raise ConfigurationError("Profanity API key must be configured")

        profanity_filter = ApiLayerProfanityFilter(settings)
        yield profanity_filter
        await profanity_filter.aclose()


class LocalProfanityProvider(ProfanityProvider):
    """Local profanity provider that leaves text unchanged."""

    __is_local__ = True

    @provide(scope=Scope.APP)
    def get_profanity_filter(self) -> ProfanityFilter:
        """Provide pass-through filter."""
        return PassthroughProfanityFilter()
