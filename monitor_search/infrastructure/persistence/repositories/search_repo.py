"""Issue and comment search repository. Case-insensitive LIKE over the tracker tables."""

from __future__ import annotations

from collections.abc import Collection, Mapping

from sqlalchemy import ColumnElement, Select, and_, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from monitor_search.application.dtos.search import CommentRow, IssueRow
from monitor_search.application.services.search_predicates import (
    AllOf,
    Contains,
    Predicate,
    SearchColumn,
)
from monitor_search.domain.enums import SearchOrdering
from monitor_search.infrastructure.persistence.models import (
    Comment,
    Issue,
    IssueClassification,
    Project,
)


def compile_predicate(
    predicate: Predicate,
    columns: Mapping[SearchColumn, ColumnElement[str]],
) -> ColumnElement[bool]:
    """Compile a predicate tree to a SQL boolean expression.

    Leaves become lower(col) LIKE lower(:value) with % and _ in the value
    escaped, so the user's text is always a bound literal.
    """
    if isinstance(predicate, Contains):
        return columns[predicate.column].icontains(predicate.value, autoescape=True)
    clauses = [compile_predicate(child, columns) for child in predicate.children]
    if isinstance(predicate, AllOf):
        return and_(*clauses)
    return or_(*clauses)


def _order_by(
    ordering: SearchOrdering,
    *,
    title: ColumnElement,
    section: ColumnElement,
    created: ColumnElement,
    row_id: ColumnElement,
) -> tuple[ColumnElement, ...]:
    """Ordering clause; row id breaks ties so store order is deterministic."""
    if ordering is SearchOrdering.ALPHA:
        return (func.lower(title).asc(), row_id.asc())
    if ordering is SearchOrdering.CATEGORY:
        return (func.lower(section).asc(), row_id.asc())
    if ordering is SearchOrdering.OLDEST:
        return (created.asc(), row_id.asc())
    return (created.desc(), row_id.asc())


class SearchRepository:
    """Read-only search across issues and comments, scoped by view level."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    def build_issue_query(
        self,
        predicate: Predicate,
        ordering: SearchOrdering,
        view_levels: Collection[int],
    ) -> Select:
        """Select matching issues whose classification access is in view_levels."""
        return (
            select(
                Issue.id,
                Issue.title,
                Project.name.label("section"),
                Issue.created,
                Issue.text,
            )
            .select_from(Issue)
            .outerjoin(Project, Issue.project_id == Project.id)
            .outerjoin(
                IssueClassification, Issue.classification == IssueClassification.id
            )
            .where(IssueClassification.access.in_(list(view_levels)))
            .where(
                compile_predicate(
                    predicate,
                    {SearchColumn.TITLE: Issue.title, SearchColumn.TEXT: Issue.text},
                )
            )
            .order_by(
                *_order_by(
                    ordering,
                    title=Issue.title,
                    section=Project.name,
                    created=Issue.created,
                    row_id=Issue.id,
                )
            )
        )

    def build_comment_query(
        self,
        predicate: Predicate,
        ordering: SearchOrdering,
        view_levels: Collection[int],
    ) -> Select:
        """Select matching comments whose parent issue's classification access is in view_levels."""
        return (
            select(
                Comment.id,
                Comment.issue_id,
                Issue.title,
                Project.name.label("section"),
                Comment.created,
                Comment.text,
            )
            .select_from(Comment)
            .outerjoin(Issue, Comment.issue_id == Issue.id)
            .outerjoin(Project, Issue.project_id == Project.id)
            .outerjoin(
                IssueClassification, Issue.classification == IssueClassification.id
            )
            .where(IssueClassification.access.in_(list(view_levels)))
            .where(compile_predicate(predicate, {SearchColumn.TEXT: Comment.text}))
            .order_by(
                *_order_by(
                    ordering,
                    title=Issue.title,
                    section=Project.name,
                    created=Comment.created,
                    row_id=Comment.id,
                )
            )
        )

    async def search_issues(
        self,
        predicate: Predicate,
        ordering: SearchOrdering,
        view_levels: Collection[int],
    ) -> list[IssueRow]:
        """Return matching, authorized issues in store order."""
        r = await self.db.execute(self.build_issue_query(predicate, ordering, view_levels))
        return [
            IssueRow(
                id=row["id"],
                title=row["title"],
                section=row["section"],
                created=row["created"],
                text=row["text"],
            )
            for row in r.mappings().all()
        ]

    async def search_comments(
        self,
        predicate: Predicate,
        ordering: SearchOrdering,
        view_levels: Collection[int],
    ) -> list[CommentRow]:
        """Return matching, authorized comments in store order."""
        r = await self.db.execute(
            self.build_comment_query(predicate, ordering, view_levels)
        )
        return [
            CommentRow(
                id=row["id"],
                issue_id=row["issue_id"],
                title=row["title"],
                section=row["section"],
                created=row["created"],
                text=row["text"],
            )
            for row in r.mappings().all()
        ]
