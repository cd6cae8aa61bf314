"""Search use cases."""

from .search_snippets import (
    SearchSnippetsRequest,
    SearchSnippetsResponse,
    SearchSnippetsUseCase,
)

__all__ = [
    "SearchSnippetsRequest",
    "SearchSnippetsResponse",
    "SearchSnippetsUseCase",
]
