"""
db/base.py

Declarative base and shared mixins for the Habicus ORM models.
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """
    Metadata root for users, goals, metrics and goal_metrics.

    Alembic and the schema check in app.main both compare against this metadata.
    """


class TimestampMixin:
    """
    Row audit columns for Habicus tables.

    Fixture records never carry these columns; the database stamps created_at.
    A fixture re-run merges onto existing rows: a row whose values change gets
    a new updated_at, and created_at is never rewritten.
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=lambda: datetime.now(timezone.utc),
    )
