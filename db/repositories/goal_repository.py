"""
Goal repository.
"""

from __future__ import annotations

from sqlalchemy import select

from db.models.goal import Goal
from db.repositories.base import EntityRepository


class GoalRepository(EntityRepository[Goal]):
    model = Goal

    def list_for_user(self, user_id: int, *, status: str | None = None) -> list[Goal]:
        stmt = select(Goal).where(Goal.user_id == user_id)
        if status:
            stmt = stmt.where(Goal.status == status)
        stmt = stmt.order_by(Goal.goal_id)
        return list(self._session.scalars(stmt).all())
