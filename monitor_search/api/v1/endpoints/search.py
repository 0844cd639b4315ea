"""Search API: issues and comments visible to the caller's view levels."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from monitor_search.api.v1.dependencies import get_search_service, get_view_levels
from monitor_search.application.use_cases.search import SearchService
from monitor_search.core.limiter import limit_search
from monitor_search.schemas.search import (
    SearchAreasResponse,
    SearchResponse,
    SearchResultResponse,
)

router = APIRouter()


@router.get("/areas", response_model=SearchAreasResponse)
async def list_search_areas() -> SearchAreasResponse:
    """Areas this provider can search (issues, comments)."""
    return SearchAreasResponse(areas=SearchService.list_searchable_areas())


@router.get("", response_model=SearchResponse)
@limit_search
async def search(
    request: Request,
    search_svc: Annotated[SearchService, Depends(get_search_service)],
    view_levels: Annotated[tuple[int, ...], Depends(get_view_levels)],
    q: str = Query("", description="search text"),
    phrase: str = Query("", description="any | all | exact"),
    ordering: str = Query(
        "", description="newest | oldest | popular | alpha | category"
    ),
    areas: list[str] | None = Query(None, description="issues and/or comments"),
) -> SearchResponse:
    """Search issues and comments. No areas selected returns an empty list."""
    items = await search_svc.search(
        text=q,
        phrase=phrase,
        ordering=ordering,
        areas=areas,
        view_levels=view_levels,
    )
    return SearchResponse(
        results=[
            SearchResultResponse(
                title=i.title,
                section=i.section,
                created=i.created,
                text=i.text,
                href=i.href,
                browsernav=i.browsernav,
            )
            for i in items
        ]
    )
