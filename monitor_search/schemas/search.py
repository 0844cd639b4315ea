"""Search API schemas."""

from datetime import datetime

from pydantic import BaseModel, Field


class SearchAreasResponse(BaseModel):
    """Searchable areas: area key -> label language key."""

    areas: dict[str, str]


class SearchResultResponse(BaseModel):
    """Single search hit (issue or comment)."""

    title: str
    section: str | None = None
    created: datetime
    text: str
    href: str = Field(..., description="Issue view address; comments add #comment-<id>")
    browsernav: str


class SearchResponse(BaseModel):
    """Search response (ordered list of hits)."""

    results: list[SearchResultResponse]
