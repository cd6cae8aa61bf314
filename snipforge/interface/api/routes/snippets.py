"""Snippet routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, status
from pydantic import BaseModel, Field

from snipforge.application.usecase.search import (
    SearchSnippetsRequest,
    SearchSnippetsResponse,
    SearchSnippetsUseCase,
)
from snipforge.application.usecase.snippet import (
    CreateSnippetRequest,
    CreateSnippetResponse,
    CreateSnippetUseCase,
    DeleteSnippetRequest,
    DeleteSnippetResponse,
    DeleteSnippetUseCase,
    GetSnippetRequest,
    GetSnippetResponse,
    GetSnippetUseCase,
    GetVariablesRequest,
    GetVariablesResponse,
    GetVariablesUseCase,
    RenderSnippetRequest,
    RenderSnippetResponse,
    RenderSnippetUseCase,
    UpdateSnippetRequest,
    UpdateSnippetResponse,
    UpdateSnippetUseCase,
)
from snipforge.domain.error import DomainError, NotFoundError

router = APIRouter(prefix="/snippets", tags=["snippets"], route_class=DishkaRoute)


class SnippetAPIRequest(BaseModel):
    """API request for creating or replacing a snippet."""

    title: str = Field(min_length=1, max_length=500)
    body: str = Field(min_length=1)
    description: str = Field(default="", max_length=10000)
    language: str = "plaintext"
    tags: list[str] = Field(default_factory=list)


class RenderAPIRequest(BaseModel):
    """API request for rendering a snippet."""

    values: dict[str, str] = Field(default_factory=dict)


def _not_found(e: NotFoundError) -> HTTPException:
    logfire.warn("Snippet not found", identifier=e.identifier)
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.get("", response_model=SearchSnippetsResponse)
async def search_snippets(
    use_case: FromDishka[SearchSnippetsUseCase],
    q: str = Query(default="", description="Search query"),
) -> SearchSnippetsResponse:
    """Search snippets.

    An empty query lists every snippet, most recently updated first.

    Example:
        GET /snippets?q=tag:git,docker|title:deploy
    """
    with logfire.span("api.search_snippets", q=q):
        return await use_case.execute(SearchSnippetsRequest(query=q))


@router.post(
    "", response_model=CreateSnippetResponse, status_code=status.HTTP_201_CREATED
)
async def create_snippet(
    request: SnippetAPIRequest,
    use_case: FromDishka[CreateSnippetUseCase],
) -> CreateSnippetResponse:
    """Create a new snippet.

    Args:
        request: Snippet data
        use_case: Create snippet use case from DI

    Returns:
        Created snippet

    Raises:
        HTTPException: If validation fails
    """
    try:
        return await use_case.execute(CreateSnippetRequest(**request.model_dump()))
    except (DomainError, ValueError) as e:
        logfire.warn("Snippet creation error", error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get("/{snippet_id}", response_model=GetSnippetResponse)
async def get_snippet(
    snippet_id: str, use_case: FromDishka[GetSnippetUseCase]
) -> GetSnippetResponse:
    """Get a snippet by ID."""
    try:
        return await use_case.execute(GetSnippetRequest(snippet_id=snippet_id))
    except NotFoundError as e:
        raise _not_found(e)


@router.put("/{snippet_id}", response_model=UpdateSnippetResponse)
async def update_snippet(
    snippet_id: str,
    request: SnippetAPIRequest,
    use_case: FromDishka[UpdateSnippetUseCase],
) -> UpdateSnippetResponse:
    """Replace a snippet's fields.

    Raises:
        HTTPException: 404 if the snippet does not exist, 400 on invalid data
    """
    try:
        return await use_case.execute(
            UpdateSnippetRequest(snippet_id=snippet_id, **request.model_dump())
        )
    except NotFoundError as e:
        raise _not_found(e)
    except (DomainError, ValueError) as e:
        logfire.warn("Snippet update error", error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.delete("/{snippet_id}", response_model=DeleteSnippetResponse)
async def delete_snippet(
    snippet_id: str, use_case: FromDishka[DeleteSnippetUseCase]
) -> DeleteSnippetResponse:
    """Delete a snippet."""
    try:
        return await use_case.execute(DeleteSnippetRequest(snippet_id=snippet_id))
    except NotFoundError as e:
        raise _not_found(e)


@router.get("/{snippet_id}/variables", response_model=GetVariablesResponse)
async def get_variables(
    snippet_id: str, use_case: FromDishka[GetVariablesUseCase]
) -> GetVariablesResponse:
    """List the ``{{variable}}`` placeholders in a snippet body."""
    try:
        return await use_case.execute(GetVariablesRequest(snippet_id=snippet_id))
    except NotFoundError as e:
        raise _not_found(e)


@router.post("/{snippet_id}/render", response_model=RenderSnippetResponse)
async def render_snippet(
    snippet_id: str,
    request: RenderAPIRequest,
    use_case: FromDishka[RenderSnippetUseCase],
) -> RenderSnippetResponse:
    """Fill a snippet's placeholders.

    Variables without a value stay as ``{{name}}`` in the output and are
    listed under ``missing``.
    """
    try:
        return await use_case.execute(
            RenderSnippetRequest(snippet_id=snippet_id, values=request.values)
        )
    except NotFoundError as e:
        raise _not_found(e)
