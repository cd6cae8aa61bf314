"""Export/import routes."""

from typing import Any

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Body, HTTPException, Query, status
from fastapi.responses import JSONResponse

from snipforge.application.usecase.transfer import (
    ExportSnippetsRequest,
    ExportSnippetsUseCase,
    ImportSnippetsRequest,
    ImportSnippetsResponse,
    ImportSnippetsUseCase,
)
from snipforge.domain.error import DomainError, ImportValidationError

router = APIRouter(prefix="/transfer", tags=["transfer"], route_class=DishkaRoute)


@router.get("/export")
async def export_snippets(
    use_case: FromDishka[ExportSnippetsUseCase],
    tags: list[str] = Query(default=[]),
) -> JSONResponse:
    """Download an export document.

    Only snippets carrying every requested tag are exported.

    Example:
        GET /transfer/export?tags=git&tags=docker
    """
    with logfire.span("api.export_snippets", tags=tags):
        result = await use_case.execute(ExportSnippetsRequest(tags=tags))
        return JSONResponse(
            content=result.document,
            headers={
                "Content-Disposition": f'attachment; filename="{result.filename}"'
            },
        )


@router.post(
    "/import",
    response_model=ImportSnippetsResponse,
    status_code=status.HTTP_201_CREATED,
)
async def import_snippets(
    use_case: FromDishka[ImportSnippetsUseCase],
    document: Any = Body(...),
) -> ImportSnippetsResponse:
    """Import an export document.

    Nothing is stored unless the whole document is valid.

    Raises:
        HTTPException: 422 naming the first invalid entry and field
    """
    try:
        return await use_case.execute(ImportSnippetsRequest(document=document))
    except ImportValidationError as e:
        logfire.warn("Import rejected", error=str(e), index=e.index, field=e.field)
        raise HTTPException(
            status_code=422,
            detail={"message": str(e), "index": e.index, "field": e.field},
        )
    except DomainError as e:
        logfire.warn("Import domain error", error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
