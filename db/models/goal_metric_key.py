"""
db/models/goal_metric_key.py

Composite identity of one goal/metric association row.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(unsafe_hash=True)
class GoalMetricKey:
    """
    Addresses a row of ``goal_metrics`` by ``(metric_id, goal_id)``.

    Two keys are equal when both ids match; the hash combines both ids so a
    key can be used in sets and as a dict key. Values are not range-checked:
    zero and negative ids are accepted as-is.
    """

    metric_id: int
    goal_id: int

    def as_identity(self) -> dict[str, int]:
        """
        Primary key mapping in the form accepted by ``Session.get``.
        """

        return {"metric_id": self.metric_id, "goal_id": self.goal_id}
