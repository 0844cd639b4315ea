"""Persistence models: ORM entities and mixins for the issue tracker tables."""

from monitor_search.infrastructure.persistence.models.classification import (
    IssueClassification,
)
from monitor_search.infrastructure.persistence.models.comment import Comment
from monitor_search.infrastructure.persistence.models.issue import Issue
from monitor_search.infrastructure.persistence.models.mixins import (
    CreatedMixin,
    IntegerIdMixin,
    TextBodyMixin,
)
from monitor_search.infrastructure.persistence.models.project import Project

__all__ = [
    "Comment",
    "CreatedMixin",
    "IntegerIdMixin",
    "Issue",
    "IssueClassification",
    "Project",
    "TextBodyMixin",
]
