"""Domain model entities for SnipForge."""

from snipforge.domain.model.snippet import DEFAULT_LANGUAGE, Snippet, SnippetFields

__all__ = [
    "DEFAULT_LANGUAGE",
    "Snippet",
    "SnippetFields",
]
