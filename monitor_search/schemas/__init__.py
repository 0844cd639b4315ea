"""Pydantic request/response schemas for the API."""

from monitor_search.schemas.health import HealthResponse
from monitor_search.schemas.search import (
    SearchAreasResponse,
    SearchResponse,
    SearchResultResponse,
)

__all__ = [
    "HealthResponse",
    "SearchAreasResponse",
    "SearchResponse",
    "SearchResultResponse",
]
