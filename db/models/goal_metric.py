"""
db/models/goal_metric.py

Association rows linking metrics to goals.
The row carries no business fields; it is addressed by GoalMetricKey.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Index, Integer
from sqlalchemy.orm import Mapped, composite, mapped_column, relationship

from db.base import Base, TimestampMixin
from db.models.goal_metric_key import GoalMetricKey

if TYPE_CHECKING:
    from db.models.goal import Goal
    from db.models.metric import Metric


class GoalMetric(Base, TimestampMixin):
    __tablename__ = "goal_metrics"

    metric_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("metrics.metric_id", ondelete="CASCADE"),
        primary_key=True,
    )
    goal_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("goals.goal_id", ondelete="CASCADE"),
        primary_key=True,
    )

    key: Mapped[GoalMetricKey] = composite(GoalMetricKey, "metric_id", "goal_id")

    goal: Mapped["Goal"] = relationship("Goal", back_populates="metric_links")
    metric: Mapped["Metric"] = relationship("Metric", back_populates="goal_links")

    __table_args__ = (Index("ix_goal_metrics_goal_id", "goal_id"),)

    def __repr__(self) -> str:
        return f"<GoalMetric metric_id={self.metric_id} goal_id={self.goal_id}>"
