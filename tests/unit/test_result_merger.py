"""Tests for result decoration (titles, hrefs) and cross-kind merging."""

from datetime import datetime

from monitor_search.application.dtos.search import (
    CommentRow,
    IssueRow,
    SearchConfig,
    SearchResult,
)
from monitor_search.application.services.result_merger import (
    comment_href,
    decorate_comment,
    decorate_issue,
    issue_href,
    merge_results,
)
from monitor_search.domain.enums import SearchOrdering

CONFIG = SearchConfig(target="1", issue_href_base="index.php?option=com_monitor&view=issue")


def _result(title: str, section: str | None, created: datetime) -> SearchResult:
    return SearchResult(
        title=title,
        section=section,
        created=created,
        text="",
        href=f"#{title}",
        browsernav="",
    )


class TestDecoration:
    def test_issue_href_addresses_issue(self) -> None:
        assert issue_href(CONFIG, 7) == "index.php?option=com_monitor&view=issue&id=7"

    def test_comment_href_adds_comment_anchor(self) -> None:
        assert (
            comment_href(CONFIG, 7, 42)
            == "index.php?option=com_monitor&view=issue&id=7#comment-42"
        )

    def test_decorate_issue(self) -> None:
        row = IssueRow(
            id=3, title="Broken", section="Core", created=datetime(2024, 1, 1), text="body"
        )
        result = decorate_issue(row, CONFIG)
        assert result.title == "Broken"
        assert result.section == "Core"
        assert result.text == "body"
        assert result.href.endswith("&id=3")
        assert result.browsernav == "1"

    def test_decorate_comment_prefixes_title_and_anchors_href(self) -> None:
        row = CommentRow(
            id=9,
            issue_id=3,
            title="Broken",
            section="Core",
            created=datetime(2024, 1, 2),
            text="me too",
        )
        result = decorate_comment(row, CONFIG)
        assert result.title == "Re: Broken"
        assert result.href.endswith("&id=3#comment-9")
        assert result.href != issue_href(CONFIG, 3)
        assert result.browsernav == "1"


class TestMergeResults:
    """Single kind keeps store order; both kinds are re-sorted together."""

    issues = [
        _result("zeta", "b", datetime(2024, 1, 1)),
        _result("Beta", "A", datetime(2024, 3, 1)),
    ]
    comments = [
        _result("Re: alpha", "c", datetime(2024, 2, 1)),
    ]

    def test_only_issues_returned_unsorted(self) -> None:
        assert merge_results(self.issues, None, SearchOrdering.ALPHA) == self.issues

    def test_only_comments_returned_unsorted(self) -> None:
        out = merge_results(None, list(reversed(self.issues)), SearchOrdering.OLDEST)
        assert out == list(reversed(self.issues))

    def test_nothing_searched(self) -> None:
        assert merge_results(None, None, SearchOrdering.NEWEST) == []

    def test_alpha_case_insensitive_across_kinds(self) -> None:
        out = merge_results(self.issues, self.comments, SearchOrdering.ALPHA)
        assert [r.title for r in out] == ["Beta", "Re: alpha", "zeta"]

    def test_category_case_insensitive(self) -> None:
        out = merge_results(self.issues, self.comments, SearchOrdering.CATEGORY)
        assert [r.section for r in out] == ["A", "b", "c"]

    def test_oldest_ascending(self) -> None:
        out = merge_results(self.issues, self.comments, SearchOrdering.OLDEST)
        assert [r.created.month for r in out] == [1, 2, 3]

    def test_newest_descending(self) -> None:
        out = merge_results(self.issues, self.comments, SearchOrdering.NEWEST)
        assert [r.created.month for r in out] == [3, 2, 1]

    def test_missing_section_sorts_first(self) -> None:
        out = merge_results(
            [_result("x", None, datetime(2024, 1, 1))],
            [_result("y", "a", datetime(2024, 1, 1))],
            SearchOrdering.CATEGORY,
        )
        assert [r.title for r in out] == ["x", "y"]

    def test_equal_timestamps_keep_all_results(self) -> None:
        same = datetime(2024, 1, 1)
        out = merge_results(
            [_result("a", None, same)], [_result("b", None, same)], SearchOrdering.NEWEST
        )
        assert {r.title for r in out} == {"a", "b"}
