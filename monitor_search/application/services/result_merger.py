"""Decorate store rows for display and merge issue and comment hits."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from monitor_search.application.dtos.search import (
    CommentRow,
    IssueRow,
    SearchConfig,
    SearchResult,
)
from monitor_search.domain.enums import SearchOrdering

COMMENT_TITLE_PREFIX = "Re: "


def issue_href(config: SearchConfig, issue_id: int) -> str:
    """Address of the issue view for issue_id."""
    return f"{config.issue_href_base}&id={issue_id}"


def comment_href(config: SearchConfig, issue_id: int, comment_id: int) -> str:
    """Address of the issue view, anchored at the comment."""
    return f"{issue_href(config, issue_id)}#comment-{comment_id}"


def decorate_issue(row: IssueRow, config: SearchConfig) -> SearchResult:
    return SearchResult(
        title=row.title,
        section=row.section,
        created=row.created,
        text=row.text,
        href=issue_href(config, row.id),
        browsernav=config.target,
    )


def decorate_comment(row: CommentRow, config: SearchConfig) -> SearchResult:
    return SearchResult(
        title=COMMENT_TITLE_PREFIX + row.title,
        section=row.section,
        created=row.created,
        text=row.text,
        href=comment_href(config, row.issue_id, row.id),
        browsernav=config.target,
    )


def _casefold(value: str | None) -> str:
    return (value or "").lower()


def sort_key(ordering: SearchOrdering) -> tuple[Callable[[SearchResult], Any], bool]:
    """Return (key, reverse) for sorted() matching the store ordering clause.

    Equal keys keep their concatenation order; callers must not rely on it.
    """
    if ordering is SearchOrdering.ALPHA:
        return (lambda r: _casefold(r.title)), False
    if ordering is SearchOrdering.CATEGORY:
        return (lambda r: _casefold(r.section)), False
    if ordering is SearchOrdering.OLDEST:
        return (lambda r: r.created), False
    return (lambda r: r.created), True


def merge_results(
    issues: Sequence[SearchResult] | None,
    comments: Sequence[SearchResult] | None,
    ordering: SearchOrdering,
) -> list[SearchResult]:
    """Concatenate issue then comment results.

    When both kinds were searched (neither is None) the combined list is
    sorted once so the kinds interleave. A single kind is returned in store
    order unchanged.
    """
    if issues is None and comments is None:
        return []
    if issues is None:
        return list(comments or ())
    if comments is None:
        return list(issues)
    key, reverse = sort_key(ordering)
    return sorted([*issues, *comments], key=key, reverse=reverse)
