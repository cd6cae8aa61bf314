"""Domain layer DI providers."""

from dishka import Scope, provide

from snipforge.config import AutocompleteSettings, SearchSettings, TransferSettings
from snipforge.domain.repository import SnippetRepository
from snipforge.domain.service import (
    FuzzyRanker,
    RankingOptions,
    SearchService,
    SnippetService,
    TagService,
    TransferService,
)
from snipforge.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    The fuzzy ranker is APP-scoped so its search index outlives a request.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_fuzzy_ranker(self, search_settings: SearchSettings) -> FuzzyRanker:
        """Provide the shared fuzzy ranker."""
        return FuzzyRanker(RankingOptions.from_settings(search_settings))

    @provide(scope=Scope.APP)
    def get_transfer_service(
        self, transfer_settings: TransferSettings
    ) -> TransferService:
        """Provide export/import domain service."""
        return TransferService(settings=transfer_settings)

    @provide
    def get_snippet_service(
        self, snippet_repository: SnippetRepository
    ) -> SnippetService:
        """Provide snippet domain service."""
        return SnippetService(snippet_repository=snippet_repository)

    @provide
    def get_search_service(
        self, snippet_repository: SnippetRepository, ranker: FuzzyRanker
    ) -> SearchService:
        """Provide search domain service."""
        return SearchService(snippet_repository=snippet_repository, ranker=ranker)

    @provide
    def get_tag_service(
        self,
        snippet_repository: SnippetRepository,
        autocomplete_settings: AutocompleteSettings,
    ) -> TagService:
        """Provide tag domain service."""
        return TagService(
            snippet_repository=snippet_repository, settings=autocomplete_settings
        )
