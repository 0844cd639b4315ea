"""Comment ORM model."""

from sqlalchemy import ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column

from monitor_search.infrastructure.persistence.database import Base
from monitor_search.infrastructure.persistence.models.mixins import (
    CreatedMixin,
    IntegerIdMixin,
    TextBodyMixin,
)


class Comment(IntegerIdMixin, CreatedMixin, TextBodyMixin, Base):
    """Comment on an issue. Table: monitor_comments."""

    __tablename__ = "monitor_comments"

    issue_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("monitor_issues.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
