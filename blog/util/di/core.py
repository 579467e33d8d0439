"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from blog.config import HomePageSettings, Settings
from blog.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_home_page_settings(self, settings: Settings) -> HomePageSettings:
        """Provide home page settings."""
        return settings.home_page
