"""Export snippets use case."""

from typing import Any

import logfire
from pydantic import BaseModel, Field

from snipforge.application.usecase.base import BaseUseCase
from snipforge.domain.repository import SnippetRepository
from snipforge.domain.service import TransferService


class ExportSnippetsRequest(BaseModel):
    """Export snippets request."""

    tags: list[str] = Field(default_factory=list)  # Only snippets with all of these


class ExportSnippetsResponse(BaseModel):
    """Export snippets response."""

    filename: str
    document: dict[str, Any]  # Serialized export document


class ExportSnippetsUseCase(BaseUseCase):
    """Use case for exporting snippets to a portable document."""

    def __init__(
        self,
        snippet_repository: SnippetRepository,
        transfer_service: TransferService,
    ) -> None:
        """Initialize export snippets use case.

        Args:
            snippet_repository: Snippet repository
            transfer_service: Transfer domain service
        """
        self.snippet_repository = snippet_repository
        self.transfer_service = transfer_service

    async def execute(self, request: ExportSnippetsRequest) -> ExportSnippetsResponse:
        """Execute export flow.

        Args:
            request: Export request with optional tag filter

        Returns:
            Export document and a suggested file name
        """
        with logfire.span("export_snippets.execute", tags=request.tags):
            snippets = await self.snippet_repository.list_all()
            document = self.transfer_service.export_snippets(snippets, request.tags)
            filename = self.transfer_service.export_filename(
                request.tags, document.exported_at.date()
            )
            return ExportSnippetsResponse(
                filename=filename, document=document.to_json_dict()
            )
