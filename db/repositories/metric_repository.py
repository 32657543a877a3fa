"""
Metric repository.
"""

from __future__ import annotations

from sqlalchemy import select

from db.models.goal_metric import GoalMetric
from db.models.metric import Metric
from db.repositories.base import EntityRepository


class MetricRepository(EntityRepository[Metric]):
    model = Metric

    def list_for_goal(self, goal_id: int) -> list[Metric]:
        """
        Metrics linked to one goal through the association table.
        """

        stmt = (
            select(Metric)
            .join(GoalMetric, GoalMetric.metric_id == Metric.metric_id)
            .where(GoalMetric.goal_id == goal_id)
            .order_by(Metric.metric_id)
        )
        return list(self._session.scalars(stmt).all())
