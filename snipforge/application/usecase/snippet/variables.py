"""Snippet variable use cases: listing placeholders and rendering a body."""

import logfire
from pydantic import BaseModel, Field

from snipforge.application.usecase.base import BaseUseCase
from snipforge.domain.service import SnippetService
from snipforge.domain.service.variables import extract_variables

from .common import parse_snippet_id


class GetVariablesRequest(BaseModel):
    """Get snippet variables request."""

    snippet_id: str


class GetVariablesResponse(BaseModel):
    """Get snippet variables response."""

    snippet_id: str
    variables: list[str]  # Distinct names, first occurrence order


class GetVariablesUseCase(BaseUseCase):
    """Use case for listing the placeholders a snippet expects."""

    def __init__(self, snippet_service: SnippetService) -> None:
        self.snippet_service = snippet_service

    async def execute(self, request: GetVariablesRequest) -> GetVariablesResponse:
        """Execute get variables flow.

        Raises:
            NotFoundError: If the snippet does not exist
        """
        with logfire.span("get_variables.execute", snippet_id=request.snippet_id):
            snippet = await self.snippet_service.get_by_id(
                parse_snippet_id(request.snippet_id)
            )
            return GetVariablesResponse(
                snippet_id=request.snippet_id,
                variables=extract_variables(snippet.body),
            )


class RenderSnippetRequest(BaseModel):
    """Render snippet request."""

    snippet_id: str
    values: dict[str, str] = Field(default_factory=dict)


class RenderSnippetResponse(BaseModel):
    """Render snippet response."""

    snippet_id: str
    rendered: str
    missing: list[str]  # Variables left as placeholders


class RenderSnippetUseCase(BaseUseCase):
    """Use case for filling a snippet's placeholders."""

    def __init__(self, snippet_service: SnippetService) -> None:
        """Initialize render snippet use case.

        Args:
            snippet_service: Snippet domain service
        """
        self.snippet_service = snippet_service

    async def execute(self, request: RenderSnippetRequest) -> RenderSnippetResponse:
        """Execute render snippet flow.

        Args:
            request: Snippet ID and values by variable name

        Returns:
            Rendered body and the variables that had no value

        Raises:
            NotFoundError: If the snippet does not exist
        """
        with logfire.span("render_snippet.execute", snippet_id=request.snippet_id):
            snippet, rendered = await self.snippet_service.render(
                parse_snippet_id(request.snippet_id), request.values
            )
            missing = [
                name
                for name in extract_variables(snippet.body)
                if name not in request.values
            ]
            if missing:
                logfire.info("Snippet rendered with missing values", missing=missing)

            return RenderSnippetResponse(
                snippet_id=request.snippet_id, rendered=rendered, missing=missing
            )
