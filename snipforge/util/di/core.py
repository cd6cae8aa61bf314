"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from snipforge.config import (
    AutocompleteSettings,
    SearchSettings,
    Settings,
    TransferSettings,
)
from snipforge.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide
    def provide_search_settings(self, settings: Settings) -> SearchSettings:
        """Provide fuzzy search settings."""
        return settings.search

    @provide
    def provide_autocomplete_settings(
        self, settings: Settings
    ) -> AutocompleteSettings:
        """Provide autocomplete settings."""
        return settings.autocomplete

    @provide
    def provide_transfer_settings(self, settings: Settings) -> TransferSettings:
        """Provide export/import settings."""
        return settings.transfer
