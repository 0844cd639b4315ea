"""Seed data for the SQLite issue store used by repository, service and API tests."""

from datetime import datetime

from monitor_search.infrastructure.persistence.models import (
    Comment,
    Issue,
    IssueClassification,
    Project,
)

# View levels used in the seed: 1 public, 2 registered, 3 special.
PUBLIC, REGISTERED, SPECIAL = 1, 2, 3


def seed_rows() -> list[object]:
    """Issues and comments shared by repository, service and API tests.

    Authorized for levels (1, 2): issues 1, 2, 3, 6 and comments 1, 2, 5, 6.
    Comment 6 is newer than every other visible comment but sits on the
    oldest issue.
    Issue 4 is SPECIAL-only; issue 5 has no classification.
    """
    return [
        IssueClassification(id=1, title="Public", access=PUBLIC),
        IssueClassification(id=2, title="Registered", access=REGISTERED),
        IssueClassification(id=3, title="Special", access=SPECIAL),
        Project(id=1, name="Backend"),
        Project(id=2, name="apps"),
        Issue(
            id=1,
            title="Login fails on Safari",
            text="The alpha build rejects valid passwords",
            project_id=1,
            classification=1,
            created=datetime(2024, 1, 1, 9, 0),
        ),
        Issue(
            id=2,
            title="crash when saving",
            text="Beta users report a crash in the editor",
            project_id=2,
            classification=1,
            created=datetime(2024, 2, 1, 9, 0),
        ),
        Issue(
            id=3,
            title="Alpha Beta rollout",
            text="plan",
            project_id=1,
            classification=2,
            created=datetime(2024, 3, 1, 9, 0),
        ),
        Issue(
            id=4,
            title="Secret exploit",
            text="alpha beta details",
            project_id=1,
            classification=3,
            created=datetime(2024, 4, 1, 9, 0),
        ),
        Issue(
            id=5,
            title="Orphan issue alpha",
            text="",
            project_id=1,
            classification=None,
            created=datetime(2024, 5, 1, 9, 0),
        ),
        Issue(
            id=6,
            title="Percent 100% done",
            text="literal wildcard",
            project_id=1,
            classification=1,
            created=datetime(2024, 6, 1, 9, 0),
        ),
        Comment(
            id=1,
            issue_id=2,
            text="Also seeing the crash on alpha",
            created=datetime(2024, 2, 2, 9, 0),
        ),
        Comment(
            id=2,
            issue_id=1,
            text="beta channel works",
            created=datetime(2024, 1, 15, 9, 0),
        ),
        Comment(
            id=3,
            issue_id=4,
            text="alpha in secret",
            created=datetime(2024, 4, 2, 9, 0),
        ),
        Comment(
            id=4,
            issue_id=5,
            text="alpha orphan comment",
            created=datetime(2024, 5, 2, 9, 0),
        ),
        Comment(
            id=5,
            issue_id=3,
            text="Alpha and Beta together",
            created=datetime(2024, 3, 5, 9, 0),
        ),
        Comment(
            id=6,
            issue_id=1,
            text="Reopened: still broken on iOS",
            created=datetime(2024, 4, 10, 9, 0),
        ),
    ]


