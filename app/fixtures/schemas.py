"""
app/fixtures/schemas.py

Validation schemas for records authored in fixture XML.

Item elements use camelCase child tags (``<goalId>``); the schemas map them to
snake_case fields and build the ORM entity for persistence.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from db.models.goal import Goal, GoalStatus
from db.models.goal_metric import GoalMetric
from db.models.goal_metric_key import GoalMetricKey
from db.models.metric import Metric
from db.models.user import User


class FixtureRecord(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
        extra="forbid",
    )


class UserFixture(FixtureRecord):
    user_id: int
    username: str = Field(..., min_length=1, max_length=50)
    email: str = Field(..., min_length=3, max_length=255)
    first_name: str | None = None
    last_name: str | None = None
    is_active: bool = True

    def to_entity(self) -> User:
        return User(
            user_id=self.user_id,
            username=self.username,
            email=self.email,
            first_name=self.first_name,
            last_name=self.last_name,
            is_active=self.is_active,
        )


class MetricFixture(FixtureRecord):
    metric_id: int
    name: str = Field(..., min_length=1, max_length=120)
    unit: str | None = None
    target_value: float | None = None
    current_value: float = 0.0

    def to_entity(self) -> Metric:
        return Metric(
            metric_id=self.metric_id,
            name=self.name,
            unit=self.unit,
            target_value=self.target_value,
            current_value=self.current_value,
        )


class NestedMetricFixture(FixtureRecord):
    """
    A metric nested under a goal.

    With only ``metricId`` it references a metric defined elsewhere and
    contributes just the association row. Otherwise only the fields given in
    the fixture are written, so a stored metric keeps the values not repeated
    here.
    """

    metric_id: int
    name: str | None = Field(default=None, min_length=1, max_length=120)
    unit: str | None = None
    target_value: float | None = None
    current_value: float | None = None

    @property
    def is_reference(self) -> bool:
        return self.model_fields_set == {"metric_id"}

    def to_entity(self) -> Metric:
        return Metric(**self.model_dump(exclude_unset=True))


class GoalMetricFixture(FixtureRecord):
    metric_id: int
    goal_id: int

    @property
    def key(self) -> GoalMetricKey:
        return GoalMetricKey(metric_id=self.metric_id, goal_id=self.goal_id)

    def to_entity(self) -> GoalMetric:
        return GoalMetric(metric_id=self.metric_id, goal_id=self.goal_id)


class GoalFixture(FixtureRecord):
    goal_id: int
    user_id: int
    title: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    goal_type: str = "habit"
    pledge_amount: Decimal | None = Field(default=None, ge=0, max_digits=10, decimal_places=2)
    start_date: date | None = None
    due_date: date | None = None
    status: str = GoalStatus.ACTIVE
    metrics: list[NestedMetricFixture] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_dates(self) -> "GoalFixture":
        if self.start_date and self.due_date and self.due_date < self.start_date:
            raise ValueError("dueDate must not be earlier than startDate")
        return self

    def to_entity(self) -> Goal:
        return Goal(
            goal_id=self.goal_id,
            user_id=self.user_id,
            title=self.title,
            description=self.description,
            goal_type=self.goal_type,
            pledge_amount=self.pledge_amount,
            start_date=self.start_date,
            due_date=self.due_date,
            status=self.status,
        )

    def metric_links(self) -> list[GoalMetricFixture]:
        return [
            GoalMetricFixture(metric_id=metric.metric_id, goal_id=self.goal_id)
            for metric in self.metrics
        ]
