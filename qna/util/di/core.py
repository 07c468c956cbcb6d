"""Core DI providers (not swappable)."""

from dishka import Scope, from_context, provide

from qna.config import AuthSettings, ProfanitySettings, Settings
from qna.util.di.base import ProviderBase


class ConfigProvider(ProviderBase):
    """Config provider.

    Settings are passed in as container context so that the app and the
    tests decide how they are loaded.
    """

    settings = from_context(provides=Settings, scope=Scope.APP)

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_profanity_settings(self, settings: Settings) -> ProfanitySettings:
        """Provide profanity filter settings."""
        return settings.profanity
