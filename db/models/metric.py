"""
db/models/metric.py

Metric model: a measurable quantity used to track progress on goals.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from db.base import Base, TimestampMixin

if TYPE_CHECKING:
    from db.models.goal_metric import GoalMetric


class Metric(Base, TimestampMixin):
    __tablename__ = "metrics"

    metric_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    name: Mapped[str] = mapped_column(String(120), nullable=False)
    unit: Mapped[str | None] = mapped_column(
        String(30),
        nullable=True,
        comment="Unit of measure (e.g., minutes, km, count)",
    )
    target_value: Mapped[float | None] = mapped_column(Float, nullable=True)
    current_value: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)

    goal_links: Mapped[list["GoalMetric"]] = relationship(
        "GoalMetric",
        back_populates="metric",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<Metric metric_id={self.metric_id} name={self.name!r}>"
