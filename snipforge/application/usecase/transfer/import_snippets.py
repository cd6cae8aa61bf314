"""Import snippets use case."""

from typing import Any

import logfire
from pydantic import BaseModel

from snipforge.application.usecase.base import BaseUseCase
from snipforge.domain.service import SnippetService, TransferService


class ImportSnippetsRequest(BaseModel):
    """Import snippets request."""

    document: Any  # Decoded export document, validated by the domain


class ImportSnippetsResponse(BaseModel):
    """Import snippets response."""

    imported: int
    snippet_ids: list[str]


class ImportSnippetsUseCase(BaseUseCase):
    """Use case for importing an export document.

    The whole document is validated before anything is written.
    """

    def __init__(
        self, transfer_service: TransferService, snippet_service: SnippetService
    ) -> None:
        """Initialize import snippets use case.

        Args:
            transfer_service: Transfer domain service
            snippet_service: Snippet domain service
        """
        self.transfer_service = transfer_service
        self.snippet_service = snippet_service

    async def execute(self, request: ImportSnippetsRequest) -> ImportSnippetsResponse:
        """Execute import flow.

        Args:
            request: Import request

        Returns:
            IDs of the created snippets, in document order

        Raises:
            ImportValidationError: If the document is invalid
        """
        with logfire.span("import_snippets.execute"):
            fields = self.transfer_service.parse_import(request.document)

            snippet_ids = []
            for snippet_fields in fields:
                snippet = await self.snippet_service.create(snippet_fields)
                snippet_ids.append(str(snippet.id))

            logfire.info("Snippets imported", count=len(snippet_ids))
            return ImportSnippetsResponse(
                imported=len(snippet_ids), snippet_ids=snippet_ids
            )
