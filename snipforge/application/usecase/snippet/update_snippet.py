"""Update snippet use case."""

import logfire
from pydantic import BaseModel

from snipforge.application.usecase.base import BaseUseCase
from snipforge.domain.service import SnippetService

from .common import SnippetItem, parse_snippet_id
from .create_snippet import CreateSnippetRequest


class UpdateSnippetRequest(CreateSnippetRequest):
    """Update snippet request.

    Updates replace every writable field, so the body mirrors creation.
    """

    snippet_id: str


class UpdateSnippetResponse(BaseModel):
    """Update snippet response."""

    snippet: SnippetItem


class UpdateSnippetUseCase(BaseUseCase):
    """Use case for replacing a snippet's fields."""

    def __init__(self, snippet_service: SnippetService) -> None:
        """Initialize update snippet use case.

        Args:
            snippet_service: Snippet domain service
        """
        self.snippet_service = snippet_service

    async def execute(self, request: UpdateSnippetRequest) -> UpdateSnippetResponse:
        """Execute update snippet flow.

        Args:
            request: Snippet ID and the new field values

        Returns:
            Updated snippet

        Raises:
            NotFoundError: If the snippet does not exist
        """
        with logfire.span("update_snippet.execute", snippet_id=request.snippet_id):
            snippet = await self.snippet_service.update(
                parse_snippet_id(request.snippet_id), request.to_fields()
            )
            return UpdateSnippetResponse(snippet=SnippetItem.from_snippet(snippet))
