"""In-memory implementation of Snippet repository for testing."""

from collections.abc import Sequence
from typing import Optional
from uuid import uuid4

from snipforge.domain.model import Snippet, SnippetFields
from snipforge.domain.model.snippet import utcnow
from snipforge.domain.repository import SnippetRepository
from snipforge.domain.value import SnippetId


class InMemorySnippetRepository(SnippetRepository):
    """In-memory implementation of SnippetRepository for testing.

    ``list_all`` hands out the same tuple until the collection changes, so
    callers can cache work keyed on the snapshot's identity.
    """

    def __init__(self, snippets: Sequence[Snippet] = ()) -> None:
        """Initialize repository, optionally seeded with snippets."""
        self._snippets: dict[SnippetId, Snippet] = {s.id: s for s in snippets}
        self._snapshot: tuple[Snippet, ...] | None = None

    async def list_all(self) -> Sequence[Snippet]:
        """List every snippet, most recently updated first."""
        if self._snapshot is None:
            self._snapshot = tuple(
                sorted(
                    self._snippets.values(),
                    key=lambda s: (s.updated_at, s.created_at),
                    reverse=True,
                )
            )
        return self._snapshot

    async def find_by_id(self, snippet_id: SnippetId) -> Optional[Snippet]:
        """Find snippet by ID."""
        return self._snippets.get(snippet_id)

    async def create(self, fields: SnippetFields) -> SnippetId:
        """Store a new snippet."""
        now = utcnow()
        snippet = Snippet(
            id=SnippetId(uuid4()),
            created_at=now,
            updated_at=now,
            **fields.model_dump(exclude={"tags"}),
            tags=fields.tags,
        )
        self._snippets[snippet.id] = snippet
        self._snapshot = None
        return snippet.id

    async def update(self, snippet_id: SnippetId, fields: SnippetFields) -> bool:
        """Replace a snippet's fields."""
        existing = self._snippets.get(snippet_id)
        if existing is None:
            return False
        self._snippets[snippet_id] = existing.with_fields(fields)
        self._snapshot = None
        return True

    async def delete(self, snippet_id: SnippetId) -> bool:
        """Delete a snippet."""
        if self._snippets.pop(snippet_id, None) is None:
            return False
        self._snapshot = None
        return True
