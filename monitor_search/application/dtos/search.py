"""DTOs for monitor search (no dependency on ORM)."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class SearchConfig:
    """Search provider options, built once at startup from Settings.

    search_issue_text: match issue bodies as well as titles.
    target: passed verbatim into each result's browsernav (where the link opens).
    issue_href_base: issue view address; the issue id (and comment anchor) is appended.
    enabled: False when the issue tracker component is disabled; search then returns [].
    """

    search_issue_text: bool = True
    target: str = ""
    issue_href_base: str = "index.php?option=com_monitor&view=issue"
    enabled: bool = True


@dataclass(frozen=True)
class IssueRow:
    """Issue hit as read from the store."""

    id: int
    title: str
    section: str | None
    created: datetime
    text: str


@dataclass(frozen=True)
class CommentRow:
    """Comment hit as read from the store. title and section come from the parent issue."""

    id: int
    issue_id: int
    title: str
    section: str | None
    created: datetime
    text: str


@dataclass(frozen=True)
class SearchResult:
    """Single search hit, decorated for display (read-model)."""

    title: str
    section: str | None
    created: datetime
    text: str
    href: str
    browsernav: str
