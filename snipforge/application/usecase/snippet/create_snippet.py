"""Create snippet use case."""

import logfire
from pydantic import BaseModel, Field

from snipforge.application.usecase.base import BaseUseCase
from snipforge.domain.model import DEFAULT_LANGUAGE, SnippetFields
from snipforge.domain.service import SnippetService
from snipforge.domain.value import TagSet

from .common import SnippetItem


class CreateSnippetRequest(BaseModel):
    """Create snippet request."""

    title: str = Field(min_length=1)
    body: str = Field(min_length=1)
    description: str = ""
    language: str = DEFAULT_LANGUAGE
    tags: list[str] = Field(default_factory=list)  # Normalized on save

    def to_fields(self) -> SnippetFields:
        """Convert to domain snippet fields."""
        return SnippetFields(
            title=self.title,
            body=self.body,
            description=self.description,
            language=self.language or DEFAULT_LANGUAGE,
            tags=TagSet(self.tags),
        )


class CreateSnippetResponse(BaseModel):
    """Create snippet response."""

    snippet: SnippetItem


class CreateSnippetUseCase(BaseUseCase):
    """Use case for creating a new snippet."""

    def __init__(self, snippet_service: SnippetService) -> None:
        """Initialize create snippet use case.

        Args:
            snippet_service: Snippet domain service
        """
        self.snippet_service = snippet_service

    async def execute(self, request: CreateSnippetRequest) -> CreateSnippetResponse:
        """Execute create snippet flow.

        Args:
            request: Create snippet request

        Returns:
            Created snippet with its assigned ID and timestamps
        """
        with logfire.span("create_snippet.execute", title=request.title):
            snippet = await self.snippet_service.create(request.to_fields())
            return CreateSnippetResponse(snippet=SnippetItem.from_snippet(snippet))
