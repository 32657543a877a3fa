"""
Repository layer exports.
"""

from db.repositories.base import EntityRepository
from db.repositories.errors import EntityNotFoundError, RepositoryError
from db.repositories.goal_metric_repository import GoalMetricRepository
from db.repositories.goal_repository import GoalRepository
from db.repositories.metric_repository import MetricRepository
from db.repositories.user_repository import UserRepository

__all__ = [
    "EntityRepository",
    "UserRepository",
    "GoalRepository",
    "MetricRepository",
    "GoalMetricRepository",
    "RepositoryError",
    "EntityNotFoundError",
]
