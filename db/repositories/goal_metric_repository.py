"""
Goal/metric association repository, addressed by GoalMetricKey.
"""

from __future__ import annotations

from sqlalchemy import select

from db.models.goal_metric import GoalMetric
from db.models.goal_metric_key import GoalMetricKey
from db.repositories.base import EntityRepository


class GoalMetricRepository(EntityRepository[GoalMetric]):
    model = GoalMetric

    def get(self, identity: GoalMetricKey) -> GoalMetric | None:  # type: ignore[override]
        return self._session.get(GoalMetric, identity.as_identity())

    def exists(self, key: GoalMetricKey) -> bool:
        return self.get(key) is not None

    def link(self, key: GoalMetricKey) -> GoalMetric:
        """
        Return the association row for ``key``, creating it when missing.
        """

        existing = self.get(key)
        if existing is not None:
            return existing
        return self.save(GoalMetric(metric_id=key.metric_id, goal_id=key.goal_id))

    def list_for_goal(self, goal_id: int) -> list[GoalMetric]:
        stmt = (
            select(GoalMetric)
            .where(GoalMetric.goal_id == goal_id)
            .order_by(GoalMetric.metric_id)
        )
        return list(self._session.scalars(stmt).all())
