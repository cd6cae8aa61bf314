"""Domain value objects for SnipForge."""

from snipforge.domain.value.identifiers import SnippetId
from snipforge.domain.value.types import (
    FilterKind,
    ParsedSearch,
    SearchFilter,
    TagName,
    TagSet,
)

__all__ = [
    # Identifiers
    "SnippetId",
    # Types
    "FilterKind",
    "ParsedSearch",
    "SearchFilter",
    "TagName",
    "TagSet",
]
