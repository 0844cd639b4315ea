"""Issue ORM model."""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from monitor_search.infrastructure.persistence.database import Base
from monitor_search.infrastructure.persistence.models.mixins import (
    CreatedMixin,
    IntegerIdMixin,
    TextBodyMixin,
)


class Issue(IntegerIdMixin, CreatedMixin, TextBodyMixin, Base):
    """Issue. Table: monitor_issues. FK to project and classification (both nullable)."""

    __tablename__ = "monitor_issues"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    project_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("monitor_projects.id"), nullable=True, index=True
    )
    classification: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("monitor_issue_classifications.id"),
        nullable=True,
        index=True,
    )
