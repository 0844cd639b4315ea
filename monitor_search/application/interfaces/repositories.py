"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from collections.abc import Collection
from typing import TYPE_CHECKING, Protocol

from monitor_search.domain.enums import SearchOrdering

if TYPE_CHECKING:
    from monitor_search.application.dtos.search import CommentRow, IssueRow
    from monitor_search.application.services.search_predicates import Predicate


class ISearchRepository(Protocol):
    """Protocol for read-only issue and comment search over the tracker store.

    Implementations apply the match predicate, restrict rows to classifications
    whose access level is in view_levels, and order rows per ordering.
    """

    async def search_issues(
        self,
        predicate: Predicate,
        ordering: SearchOrdering,
        view_levels: Collection[int],
    ) -> list[IssueRow]:
        """Return matching, authorized issues in store order."""
        ...

    async def search_comments(
        self,
        predicate: Predicate,
        ordering: SearchOrdering,
        view_levels: Collection[int],
    ) -> list[CommentRow]:
        """Return matching, authorized comments in store order (title/section from parent issue)."""
        ...
