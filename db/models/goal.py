"""
db/models/goal.py

Goal model. A goal belongs to one user and is tracked by zero or more metrics
through the ``goal_metrics`` association table.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import Date, ForeignKey, Index, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from db.base import Base, TimestampMixin

if TYPE_CHECKING:
    from db.models.goal_metric import GoalMetric
    from db.models.user import User


class GoalStatus:
    ACTIVE = "active"
    COMPLETED = "completed"
    ABANDONED = "abandoned"


class Goal(Base, TimestampMixin):
    """
    A habit or target a user commits to, optionally backed by a pledge amount.
    """

    __tablename__ = "goals"

    goal_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.user_id", ondelete="CASCADE"),
        nullable=False,
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    goal_type: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        default="habit",
        comment="Kind of goal (e.g., habit, milestone)",
    )
    pledge_amount: Mapped[Decimal | None] = mapped_column(
        Numeric(10, 2),
        nullable=True,
        comment="Amount the user pledges against completing the goal",
    )
    start_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    due_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    status: Mapped[str] = mapped_column(String(30), nullable=False, default=GoalStatus.ACTIVE)

    # ── Relationships ──────────────────────────────────────────────────────────

    user: Mapped["User"] = relationship("User", back_populates="goals")
    metric_links: Mapped[list["GoalMetric"]] = relationship(
        "GoalMetric",
        back_populates="goal",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    __table_args__ = (
        Index("ix_goals_user_id", "user_id"),
        Index("ix_goals_status", "status"),
    )

    def __repr__(self) -> str:
        return f"<Goal goal_id={self.goal_id} user_id={self.user_id} title={self.title!r}>"
