"""SQLite implementation of Snippet repository."""

from collections.abc import Sequence
from typing import Optional
from uuid import uuid4

from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from snipforge.domain.model import Snippet, SnippetFields
from snipforge.domain.model.snippet import utcnow
from snipforge.domain.repository import SnippetRepository
from snipforge.domain.value import SnippetId
from snipforge.persistence.mappers import fields_to_row, row_to_snippet
from snipforge.persistence.tables import snippets_table


class SqliteSnippetRepository(SnippetRepository):
    """SQLite implementation of SnippetRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    async def list_all(self) -> Sequence[Snippet]:
        """List every snippet, most recently updated first."""
        stmt = select(snippets_table).order_by(
            snippets_table.c.updated_at.desc(), snippets_table.c.created_at.desc()
        )
        result = await self.session.execute(stmt)
        rows = result.fetchall()
        return tuple(row_to_snippet(row._asdict()) for row in rows)

    async def find_by_id(self, snippet_id: SnippetId) -> Optional[Snippet]:
        """Find snippet by ID."""
        stmt = select(snippets_table).where(snippets_table.c.id == str(snippet_id))
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_snippet(row._asdict()) if row else None

    async def create(self, fields: SnippetFields) -> SnippetId:
        """Insert a snippet and return its new ID."""
        snippet_id = SnippetId(uuid4())
        now = utcnow()
        stmt = insert(snippets_table).values(
            id=str(snippet_id),
            created_at=now,
            updated_at=now,
            **fields_to_row(fields),
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return snippet_id

    async def update(self, snippet_id: SnippetId, fields: SnippetFields) -> bool:
        """Replace all writable fields and refresh ``updated_at``.

        ``updated_at`` never moves backwards, even if the clock does.
        """
        stmt = (
            update(snippets_table)
            .where(snippets_table.c.id == str(snippet_id))
            .values(
                # Scalar max of the stored and current time
                updated_at=func.max(snippets_table.c.updated_at, utcnow()),
                **fields_to_row(fields),
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def delete(self, snippet_id: SnippetId) -> bool:
        """Delete a snippet."""
        stmt = delete(snippets_table).where(snippets_table.c.id == str(snippet_id))
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0
