"""Snippet repository interface."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Optional

from snipforge.domain.model import Snippet, SnippetFields
from snipforge.domain.value import SnippetId


class SnippetRepository(ABC):
    """Repository for the Snippet aggregate.

    This is the persistence collaborator consumed by the search and tagging
    code. Implementations live in the persistence layer.
    """

    @abstractmethod
    async def list_all(self) -> Sequence[Snippet]:
        """List every snippet, most recently updated first.

        Returns:
            Snippet collection snapshot
        """
        pass

    @abstractmethod
    async def find_by_id(self, snippet_id: SnippetId) -> Optional[Snippet]:
        """Find a snippet by ID.

        Args:
            snippet_id: The snippet's unique identifier

        Returns:
            The snippet if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, fields: SnippetFields) -> SnippetId:
        """Create a snippet.

        Args:
            fields: Snippet field values

        Returns:
            Identifier assigned to the new snippet
        """
        pass

    @abstractmethod
    async def update(self, snippet_id: SnippetId, fields: SnippetFields) -> bool:
        """Replace a snippet's fields and refresh its ``updated_at``.

        Args:
            snippet_id: The snippet ID
            fields: New field values

        Returns:
            True if the snippet existed and was updated
        """
        pass

    @abstractmethod
    async def delete(self, snippet_id: SnippetId) -> bool:
        """Delete a snippet.

        Args:
            snippet_id: The snippet ID

        Returns:
            True if the snippet existed and was deleted
        """
        pass
