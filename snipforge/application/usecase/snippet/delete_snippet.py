"""Delete snippet use case."""

import logfire
from pydantic import BaseModel

from snipforge.application.usecase.base import BaseUseCase
from snipforge.domain.service import SnippetService

from .common import parse_snippet_id


class DeleteSnippetRequest(BaseModel):
    """Delete snippet request."""

    snippet_id: str


class DeleteSnippetResponse(BaseModel):
    """Delete snippet response."""

    snippet_id: str
    deleted: bool = True


class DeleteSnippetUseCase(BaseUseCase):
    """Use case for deleting a snippet."""

    def __init__(self, snippet_service: SnippetService) -> None:
        self.snippet_service = snippet_service

    async def execute(self, request: DeleteSnippetRequest) -> DeleteSnippetResponse:
        """Execute delete snippet flow.

        Raises:
            NotFoundError: If the snippet does not exist
        """
        with logfire.span("delete_snippet.execute", snippet_id=request.snippet_id):
            await self.snippet_service.delete(parse_snippet_id(request.snippet_id))
            return DeleteSnippetResponse(snippet_id=request.snippet_id)
