"""SQLAlchemy mixins shared by the issue tracker tables.

Provides: IntegerIdMixin, CreatedMixin, TextBodyMixin.
"""

from datetime import datetime

from sqlalchemy import DateTime, Integer, Text
from sqlalchemy.orm import Mapped, declared_attr, mapped_column
from sqlalchemy.sql import func


class IntegerIdMixin:
    """Mixin for autoincrement integer primary keys (the tracker's id scheme)."""

    @declared_attr
    def id(cls) -> Mapped[int]:
        return mapped_column(Integer, primary_key=True, autoincrement=True)


class CreatedMixin:
    """Mixin for the creation timestamp (server default, indexed for ordering)."""

    @declared_attr
    def created(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime, server_default=func.now(), nullable=False, index=True
        )


class TextBodyMixin:
    """Mixin for the free-text body searched by LIKE."""

    @declared_attr
    def text(cls) -> Mapped[str]:
        return mapped_column(Text, nullable=False, default="")
