"""SQLite repository implementations."""

from snipforge.persistence.repository.snippet import SqliteSnippetRepository

__all__ = [
    "SqliteSnippetRepository",
]
