"""Application DTOs (no ORM dependency)."""

from monitor_search.application.dtos.search import (
    CommentRow,
    IssueRow,
    SearchConfig,
    SearchResult,
)

__all__ = [
    "CommentRow",
    "IssueRow",
    "SearchConfig",
    "SearchResult",
]
