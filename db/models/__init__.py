"""
Model package exports.

Import all SQLAlchemy models here so metadata registration and Alembic
autogeneration work without extra imports.
"""

from db.models.goal import Goal, GoalStatus
from db.models.goal_metric import GoalMetric
from db.models.goal_metric_key import GoalMetricKey
from db.models.metric import Metric
from db.models.user import User

__all__ = [
    "User",
    "Goal",
    "GoalStatus",
    "Metric",
    "GoalMetric",
    "GoalMetricKey",
]
