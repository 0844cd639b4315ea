"""Application services: match predicates and result merging."""

from monitor_search.application.services.result_merger import (
    COMMENT_TITLE_PREFIX,
    comment_href,
    decorate_comment,
    decorate_issue,
    issue_href,
    merge_results,
    sort_key,
)
from monitor_search.application.services.search_predicates import (
    AllOf,
    AnyOf,
    Contains,
    Predicate,
    SearchColumn,
    build_match_predicate,
    comment_columns,
    issue_columns,
    tokenize,
)

__all__ = [
    "AllOf",
    "AnyOf",
    "COMMENT_TITLE_PREFIX",
    "Contains",
    "Predicate",
    "SearchColumn",
    "build_match_predicate",
    "comment_columns",
    "comment_href",
    "decorate_comment",
    "decorate_issue",
    "issue_columns",
    "issue_href",
    "merge_results",
    "sort_key",
    "tokenize",
]
