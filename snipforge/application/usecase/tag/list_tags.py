"""List tags use case."""

import logfire
from pydantic import BaseModel

from snipforge.application.usecase.base import BaseUseCase
from snipforge.domain.service import TagService


class ListTagsRequest(BaseModel):
    """List tags request."""


class ListTagsResponse(BaseModel):
    """List tags response."""

    tags: list[str]  # Sorted alphabetically


class ListTagsUseCase(BaseUseCase):
    """Use case for listing the tag vocabulary."""

    def __init__(self, tag_service: TagService) -> None:
        """Initialize list tags use case.

        Args:
            tag_service: Tag domain service
        """
        self.tag_service = tag_service

    async def execute(self, request: ListTagsRequest) -> ListTagsResponse:
        """Execute list tags flow.

        Args:
            request: List tags request

        Returns:
            Every distinct tag in use
        """
        with logfire.span("list_tags.execute"):
            tags = await self.tag_service.get_vocabulary()
            return ListTagsResponse(tags=tags)
