"""Tag routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query

from snipforge.application.usecase.tag import (
    CompleteTagsRequest,
    CompleteTagsResponse,
    CompleteTagsUseCase,
    ListTagsRequest,
    ListTagsResponse,
    ListTagsUseCase,
    SuggestTagsRequest,
    SuggestTagsResponse,
    SuggestTagsUseCase,
)

router = APIRouter(
    prefix="/tags",
    tags=["tags"],
    route_class=DishkaRoute,
)


@router.get(
    "",
    response_model=ListTagsResponse,
    summary="List all tags in use",
    description="Get every distinct tag attached to a snippet, sorted alphabetically.",
)
async def list_tags(use_case: FromDishka[ListTagsUseCase]) -> ListTagsResponse:
    """List the tag vocabulary."""
    with logfire.span("api.list_tags"):
        return await use_case.execute(ListTagsRequest())


@router.get(
    "/suggest",
    response_model=SuggestTagsResponse,
    summary="Suggest tags by prefix",
)
async def suggest_tags(
    use_case: FromDishka[SuggestTagsUseCase],
    partial: str = "",
    limit: int | None = Query(default=None, ge=1, le=50),
) -> SuggestTagsResponse:
    """Suggest tags starting with ``partial``.

    Args:
        use_case: Suggest tags use case (injected)
        partial: Prefix being typed
        limit: Maximum number of suggestions

    Example:
        GET /tags/suggest?partial=do
    """
    with logfire.span("api.suggest_tags", partial=partial, limit=limit):
        return await use_case.execute(SuggestTagsRequest(partial=partial, limit=limit))


@router.post(
    "/complete",
    response_model=CompleteTagsResponse,
    summary="Autocomplete a tag",
    description=(
        "Complete the tag being typed in a tag list (mode 'tags'), give an "
        "inline suggestion at the caret (mode 'cursor') or complete inside a "
        "tag: clause of a search query (mode 'query')."
    ),
)
async def complete_tags(
    request: CompleteTagsRequest, use_case: FromDishka[CompleteTagsUseCase]
) -> CompleteTagsResponse:
    """Autocomplete a tag."""
    with logfire.span("api.complete_tags", mode=request.mode.value):
        return await use_case.execute(request)
