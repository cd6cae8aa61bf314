"""Search snippets use case."""

import logfire
from pydantic import BaseModel

from snipforge.application.usecase.base import BaseUseCase
from snipforge.application.usecase.snippet import SnippetItem
from snipforge.domain.service import SearchService


class SearchSnippetsRequest(BaseModel):
    """Search snippets request.

    ``query`` accepts ``tag:``, ``title:`` and ``body:`` clauses joined by
    ``|``; anything else is treated as free text.
    """

    query: str = ""


class SearchSnippetsResponse(BaseModel):
    """Search snippets response."""

    query: str
    snippets: list[SnippetItem]
    total: int


class SearchSnippetsUseCase(BaseUseCase):
    """Use case for searching the snippet collection."""

    def __init__(self, search_service: SearchService) -> None:
        """Initialize search snippets use case.

        Args:
            search_service: Search domain service
        """
        self.search_service = search_service

    async def execute(self, request: SearchSnippetsRequest) -> SearchSnippetsResponse:
        """Execute search flow.

        Args:
            request: Search request

        Returns:
            Matching snippets in presentation order
        """
        with logfire.span("search_snippets.execute", query=request.query):
            results = await self.search_service.search(request.query)
            items = [SnippetItem.from_snippet(snippet) for snippet in results]
            return SearchSnippetsResponse(
                query=request.query, snippets=items, total=len(items)
            )
