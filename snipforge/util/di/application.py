"""Application layer DI providers."""

from dishka import Scope, provide

from snipforge.application.usecase.search import SearchSnippetsUseCase
from snipforge.application.usecase.snippet import (
    CreateSnippetUseCase,
    DeleteSnippetUseCase,
    GetSnippetUseCase,
    GetVariablesUseCase,
    RenderSnippetUseCase,
    UpdateSnippetUseCase,
)
from snipforge.application.usecase.tag import (
    CompleteTagsUseCase,
    ListTagsUseCase,
    SuggestTagsUseCase,
)
from snipforge.application.usecase.transfer import (
    ExportSnippetsUseCase,
    ImportSnippetsUseCase,
)
from snipforge.domain.repository import SnippetRepository
from snipforge.domain.service import (
    SearchService,
    SnippetService,
    TagService,
    TransferService,
)
from snipforge.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Snippet use cases
    @provide
    def get_create_snippet_use_case(
        self, snippet_service: SnippetService
    ) -> CreateSnippetUseCase:
        """Provide create snippet use case."""
        return CreateSnippetUseCase(snippet_service=snippet_service)

    @provide
    def get_get_snippet_use_case(
        self, snippet_service: SnippetService
    ) -> GetSnippetUseCase:
        """Provide get snippet use case."""
        return GetSnippetUseCase(snippet_service=snippet_service)

    @provide
    def get_update_snippet_use_case(
        self, snippet_service: SnippetService
    ) -> UpdateSnippetUseCase:
        """Provide update snippet use case."""
        return UpdateSnippetUseCase(snippet_service=snippet_service)

    @provide
    def get_delete_snippet_use_case(
        self, snippet_service: SnippetService
    ) -> DeleteSnippetUseCase:
        """Provide delete snippet use case."""
        return DeleteSnippetUseCase(snippet_service=snippet_service)

    @provide
    def get_get_variables_use_case(
        self, snippet_service: SnippetService
    ) -> GetVariablesUseCase:
        """Provide get variables use case."""
        return GetVariablesUseCase(snippet_service=snippet_service)

    @provide
    def get_render_snippet_use_case(
        self, snippet_service: SnippetService
    ) -> RenderSnippetUseCase:
        """Provide render snippet use case."""
        return RenderSnippetUseCase(snippet_service=snippet_service)

    # Search use cases
    @provide
    def get_search_snippets_use_case(
        self, search_service: SearchService
    ) -> SearchSnippetsUseCase:
        """Provide search snippets use case."""
        return SearchSnippetsUseCase(search_service=search_service)

    # Tag use cases
    @provide
    def get_list_tags_use_case(self, tag_service: TagService) -> ListTagsUseCase:
        """Provide list tags use case."""
        return ListTagsUseCase(tag_service=tag_service)

    @provide
    def get_suggest_tags_use_case(
        self, tag_service: TagService
    ) -> SuggestTagsUseCase:
        """Provide suggest tags use case."""
        return SuggestTagsUseCase(tag_service=tag_service)

    @provide
    def get_complete_tags_use_case(
        self, tag_service: TagService
    ) -> CompleteTagsUseCase:
        """Provide complete tags use case."""
        return CompleteTagsUseCase(tag_service=tag_service)

    # Transfer use cases
    @provide
    def get_export_snippets_use_case(
        self,
        snippet_repository: SnippetRepository,
        transfer_service: TransferService,
    ) -> ExportSnippetsUseCase:
        """Provide export snippets use case."""
        return ExportSnippetsUseCase(
            snippet_repository=snippet_repository, transfer_service=transfer_service
        )

    @provide
    def get_import_snippets_use_case(
        self, transfer_service: TransferService, snippet_service: SnippetService
    ) -> ImportSnippetsUseCase:
        """Provide import snippets use case."""
        return ImportSnippetsUseCase(
            transfer_service=transfer_service, snippet_service=snippet_service
        )
