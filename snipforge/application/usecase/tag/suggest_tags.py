"""Suggest tags use case."""

import logfire
from pydantic import BaseModel, Field

from snipforge.application.usecase.base import BaseUseCase
from snipforge.domain.service import TagService


class SuggestTagsRequest(BaseModel):
    """Suggest tags request."""

    partial: str = ""
    limit: int | None = Field(default=None, ge=1, le=50)


class SuggestTagsResponse(BaseModel):
    """Suggest tags response."""

    partial: str
    suggestions: list[str]


class SuggestTagsUseCase(BaseUseCase):
    """Use case for prefix tag suggestions."""

    def __init__(self, tag_service: TagService) -> None:
        self.tag_service = tag_service

    async def execute(self, request: SuggestTagsRequest) -> SuggestTagsResponse:
        """Execute suggest tags flow."""
        with logfire.span("suggest_tags.execute", partial=request.partial):
            suggestions = await self.tag_service.suggest(request.partial, request.limit)
            return SuggestTagsResponse(partial=request.partial, suggestions=suggestions)
