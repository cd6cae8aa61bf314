"""Search domain service."""

from collections.abc import Sequence

import logfire

from snipforge.domain.model import Snippet
from snipforge.domain.repository import SnippetRepository

from .base import Service
from .filter_engine import apply_filters
from .fuzzy_ranker import FuzzyRanker
from .query_parser import parse_search_query


class SearchService(Service):
    """Domain service answering search queries over the snippet collection.

    A query with any ``tag:``, ``title:`` or ``body:`` clause, or with more
    than one clause, goes through the structured filter engine and keeps the
    collection order, so every clause must match. A single free-text clause
    is fuzzy-ranked, best match first. A blank query returns everything.
    """

    def __init__(
        self, snippet_repository: SnippetRepository, ranker: FuzzyRanker
    ) -> None:
        """Initialize search service.

        Args:
            snippet_repository: Snippet repository
            ranker: Fuzzy ranker; reuses its index while the repository hands
                out the same collection snapshot
        """
        self.snippet_repository = snippet_repository
        self.ranker = ranker

    async def search(self, query: str) -> Sequence[Snippet]:
        """Search the stored snippets.

        Args:
            query: Raw query text

        Returns:
            Matching snippets in presentation order
        """
        with logfire.span("search_service.search", query=query):
            snippets = await self.snippet_repository.list_all()
            results = self.search_snapshot(snippets, query)
            logfire.info(
                "Search completed", total=len(snippets), matched=len(results)
            )
            return results

    def search_snapshot(
        self, snippets: Sequence[Snippet], query: str
    ) -> Sequence[Snippet]:
        """Search an in-memory snapshot.

        Args:
            snippets: Collection snapshot
            query: Raw query text

        Returns:
            Matching snippets in presentation order
        """
        parsed = parse_search_query(query)
        if not parsed.has_filters:
            return snippets

        if parsed.has_prefixed_filters or len(parsed.filters) > 1:
            return apply_filters(snippets, parsed)

        return self.ranker.rank(snippets, parsed.filters[0].value)
