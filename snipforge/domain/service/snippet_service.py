"""Snippet domain service."""

from collections.abc import Mapping

import logfire

from snipforge.domain.error import NotFoundError
from snipforge.domain.model import Snippet, SnippetFields
from snipforge.domain.repository import SnippetRepository
from snipforge.domain.value import SnippetId

from . import variables
from .base import Service


class SnippetService(Service):
    """Domain service for snippet operations."""

    def __init__(self, snippet_repository: SnippetRepository) -> None:
        """Initialize snippet service.

        Args:
            snippet_repository: Snippet repository
        """
        self.snippet_repository = snippet_repository

    async def get_by_id(self, snippet_id: SnippetId) -> Snippet:
        """Get a snippet by ID.

        Args:
            snippet_id: Snippet ID

        Returns:
            Snippet

        Raises:
            NotFoundError: If snippet not found
        """
        with logfire.span("snippet_service.get_by_id", snippet_id=str(snippet_id)):
            snippet = await self.snippet_repository.find_by_id(snippet_id)
            if snippet is None:
                logfire.warn("Snippet not found", snippet_id=str(snippet_id))
                raise NotFoundError("Snippet", str(snippet_id))
            return snippet

    async def create(self, fields: SnippetFields) -> Snippet:
        """Create a snippet.

        Args:
            fields: Snippet fields

        Returns:
            Created snippet
        """
        with logfire.span("snippet_service.create", title=fields.title):
            snippet_id = await self.snippet_repository.create(fields)
            logfire.info(
                "Snippet created", snippet_id=str(snippet_id), tags=list(fields.tags)
            )
            return await self.get_by_id(snippet_id)

    async def update(self, snippet_id: SnippetId, fields: SnippetFields) -> Snippet:
        """Replace a snippet's fields.

        Args:
            snippet_id: Snippet ID
            fields: New field values

        Returns:
            Updated snippet

        Raises:
            NotFoundError: If snippet not found
        """
        with logfire.span("snippet_service.update", snippet_id=str(snippet_id)):
            updated = await self.snippet_repository.update(snippet_id, fields)
            if not updated:
                logfire.warn("Snippet not found for update", snippet_id=str(snippet_id))
                raise NotFoundError("Snippet", str(snippet_id))
            logfire.info("Snippet updated", snippet_id=str(snippet_id))
            return await self.get_by_id(snippet_id)

    async def delete(self, snippet_id: SnippetId) -> None:
        """Delete a snippet.

        Args:
            snippet_id: Snippet ID

        Raises:
            NotFoundError: If snippet not found
        """
        with logfire.span("snippet_service.delete", snippet_id=str(snippet_id)):
            deleted = await self.snippet_repository.delete(snippet_id)
            if not deleted:
                logfire.warn("Snippet not found for delete", snippet_id=str(snippet_id))
                raise NotFoundError("Snippet", str(snippet_id))
            logfire.info("Snippet deleted", snippet_id=str(snippet_id))

    async def render(
        self, snippet_id: SnippetId, values: Mapping[str, str]
    ) -> tuple[Snippet, str]:
        """Fill a snippet's placeholders.

        Args:
            snippet_id: Snippet ID
            values: Values by variable name; missing names stay as placeholders

        Returns:
            The snippet and its rendered body

        Raises:
            NotFoundError: If snippet not found
        """
        with logfire.span(
            "snippet_service.render",
            snippet_id=str(snippet_id),
            provided=sorted(values),
        ):
            snippet = await self.get_by_id(snippet_id)
            rendered = variables.substitute(snippet.body, values)
            return snippet, rendered
