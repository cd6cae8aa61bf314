"""In-memory repository implementations for testing."""

from .snippet import InMemorySnippetRepository

__all__ = [
    "InMemorySnippetRepository",
]
