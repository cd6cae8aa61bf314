"""Shared snippet response shapes."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from snipforge.domain.error import NotFoundError
from snipforge.domain.model import Snippet
from snipforge.domain.value import SnippetId


class SnippetItem(BaseModel):
    """Snippet in a response."""

    snippet_id: str
    title: str
    body: str
    description: str
    language: str
    tags: list[str]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_snippet(cls, snippet: Snippet) -> "SnippetItem":
        """Build a response item from the domain model."""
        return cls(
            snippet_id=str(snippet.id),
            title=snippet.title,
            body=snippet.body,
            description=snippet.description,
            language=snippet.language,
            tags=list(snippet.tags),
            created_at=snippet.created_at,
            updated_at=snippet.updated_at,
        )


def parse_snippet_id(value: str) -> SnippetId:
    """Parse a snippet ID; a malformed ID can never name a stored snippet.

    Raises:
        NotFoundError: If the value is not a UUID
    """
    try:
        return SnippetId(UUID(value))
    except ValueError:
        raise NotFoundError("Snippet", value) from None
