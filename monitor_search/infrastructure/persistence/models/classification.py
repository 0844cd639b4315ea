"""IssueClassification ORM model. Carries the view level an issue requires."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from monitor_search.infrastructure.persistence.database import Base
from monitor_search.infrastructure.persistence.models.mixins import IntegerIdMixin


class IssueClassification(IntegerIdMixin, Base):
    """Issue classification. Table: monitor_issue_classifications.

    access is the view-level id a caller must hold to see issues (and their
    comments) with this classification.
    """

    __tablename__ = "monitor_issue_classifications"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    access: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
