"""Issue and comment search use case. Delegates store access to ISearchRepository."""

from __future__ import annotations

import logging
from collections.abc import Collection
from typing import TYPE_CHECKING, Any

from monitor_search.application.dtos.search import SearchConfig, SearchResult
from monitor_search.application.services.result_merger import (
    decorate_comment,
    decorate_issue,
    merge_results,
)
from monitor_search.application.services.search_predicates import (
    build_match_predicate,
    comment_columns,
    issue_columns,
)
from monitor_search.domain.enums import PhraseMode, SearchArea, SearchOrdering
from monitor_search.shared.telemetry.tracing import add_span_attributes, traced

if TYPE_CHECKING:
    from monitor_search.application.interfaces.repositories import ISearchRepository

logger = logging.getLogger(__name__)

# Language keys; the host localizes them.
SEARCH_AREA_LABELS: dict[str, str] = {
    SearchArea.ISSUES.value: "MONITOR_SEARCH_ISSUES",
    SearchArea.COMMENTS.value: "MONITOR_SEARCH_COMMENTS",
}


class SearchService:
    """Search provider for issues and comments (access-level scoped).

    search_repo may be None only for a disabled component, which never
    reaches the store.

    search() never raises for bad input: a disabled component, a missing or
    non-overlapping area selection, or empty text all yield []. Store errors
    propagate to the caller.
    """

    def __init__(
        self, search_repo: "ISearchRepository | None", config: SearchConfig
    ) -> None:
        self.search_repo = search_repo
        self.config = config

    @staticmethod
    def list_searchable_areas() -> dict[str, str]:
        """Return the searchable areas: area key -> label language key."""
        return dict(SEARCH_AREA_LABELS)

    def select_areas(self, areas: Any) -> list[SearchArea]:
        """Intersect requested areas with the supported ones (declaration order).

        Anything other than a set, list or tuple (e.g. None) selects nothing.
        """
        if not isinstance(areas, (set, frozenset, list, tuple)):
            return []
        requested = {
            a.value if isinstance(a, SearchArea) else a
            for a in areas
            if isinstance(a, str)
        }
        return [area for area in SearchArea if area.value in requested]

    @traced("monitor_search.search")
    async def search(
        self,
        text: str,
        phrase: str = "",
        ordering: str = "",
        areas: Any = None,
        view_levels: Collection[int] = (),
    ) -> list[SearchResult]:
        """Search issues and/or comments.

        Args:
            text: Query text; stripped before use.
            phrase: "any" | "all" | anything else (exact substring).
            ordering: "newest" | "oldest" | "popular" | "alpha" | "category".
            areas: Requested area keys; None searches nothing.
            view_levels: Access levels the caller is authorized to view.

        Returns:
            Decorated results; re-sorted across kinds only when both areas are searched.
        """
        if not self.config.enabled:
            logger.info("Issue tracker component disabled; returning no search results")
            return []
        selected = self.select_areas(areas)
        if not selected:
            return []
        text = (text or "").strip()
        if not text:
            return []

        mode = PhraseMode.parse(phrase)
        order = SearchOrdering.parse(ordering)
        levels = list(view_levels)
        logger.debug(
            "Searching areas=%s phrase=%s ordering=%s levels=%s",
            [a.value for a in selected],
            mode.value,
            order.value,
            levels,
        )

        issue_results: list[SearchResult] | None = None
        comment_results: list[SearchResult] | None = None
        if SearchArea.ISSUES in selected:
            predicate = build_match_predicate(
                text, mode, issue_columns(self.config.search_issue_text)
            )
            issue_rows = await self.search_repo.search_issues(predicate, order, levels)
            issue_results = [decorate_issue(row, self.config) for row in issue_rows]
        if SearchArea.COMMENTS in selected:
            predicate = build_match_predicate(text, mode, comment_columns())
            comment_rows = await self.search_repo.search_comments(
                predicate, order, levels
            )
            comment_results = [decorate_comment(row, self.config) for row in comment_rows]

        results = merge_results(issue_results, comment_results, order)
        add_span_attributes(
            issue_count=len(issue_results or ()),
            comment_count=len(comment_results or ()),
        )
        logger.debug(
            "Search returned %d issues, %d comments",
            len(issue_results or ()),
            len(comment_results or ()),
        )
        return results
