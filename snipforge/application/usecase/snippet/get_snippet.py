"""Get snippet use case."""

import logfire
from pydantic import BaseModel

from snipforge.application.usecase.base import BaseUseCase
from snipforge.domain.service import SnippetService

from .common import SnippetItem, parse_snippet_id


class GetSnippetRequest(BaseModel):
    """Get snippet request."""

    snippet_id: str


class GetSnippetResponse(BaseModel):
    """Get snippet response."""

    snippet: SnippetItem


class GetSnippetUseCase(BaseUseCase):
    """Use case for fetching a single snippet."""

    def __init__(self, snippet_service: SnippetService) -> None:
        self.snippet_service = snippet_service

    async def execute(self, request: GetSnippetRequest) -> GetSnippetResponse:
        """Execute get snippet flow.

        Raises:
            NotFoundError: If the snippet does not exist
        """
        with logfire.span("get_snippet.execute", snippet_id=request.snippet_id):
            snippet = await self.snippet_service.get_by_id(
                parse_snippet_id(request.snippet_id)
            )
            return GetSnippetResponse(snippet=SnippetItem.from_snippet(snippet))
