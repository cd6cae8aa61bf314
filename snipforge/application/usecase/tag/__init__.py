"""Tag use cases."""

from .complete_tags import (
    CompleteTagsRequest,
    CompleteTagsResponse,
    CompleteTagsUseCase,
    CompletionMode,
)
from .list_tags import ListTagsRequest, ListTagsResponse, ListTagsUseCase
from .suggest_tags import SuggestTagsRequest, SuggestTagsResponse, SuggestTagsUseCase

__all__ = [
    "CompleteTagsRequest",
    "CompleteTagsResponse",
    "CompleteTagsUseCase",
    "CompletionMode",
    "ListTagsRequest",
    "ListTagsResponse",
    "ListTagsUseCase",
    "SuggestTagsRequest",
    "SuggestTagsResponse",
    "SuggestTagsUseCase",
]
