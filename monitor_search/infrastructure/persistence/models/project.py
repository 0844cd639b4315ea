"""Project ORM model. An issue's project name is shown as the result section."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from monitor_search.infrastructure.persistence.database import Base
from monitor_search.infrastructure.persistence.models.mixins import IntegerIdMixin


class Project(IntegerIdMixin, Base):
    """Issue tracker project. Table: monitor_projects."""

    __tablename__ = "monitor_projects"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
