"""
Storage sinks for flattened fixture records, keyed by record kind.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any, Protocol

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.fixtures.errors import FixturePersistenceError, UnregisteredRecordKindError
from db.repositories.base import EntityRepository
from db.repositories.goal_metric_repository import GoalMetricRepository
from db.repositories.goal_repository import GoalRepository
from db.repositories.metric_repository import MetricRepository
from db.repositories.user_repository import UserRepository


class RecordKind(str, Enum):
    USER = "User"
    GOAL = "Goal"
    METRIC = "Metric"
    GOAL_METRIC = "GoalMetric"

    @classmethod
    def of(cls, record: Any) -> "RecordKind":
        """
        Resolve a record's runtime type name to a kind.
        """

        type_name = type(record).__name__
        try:
            return cls(type_name)
        except ValueError as exc:
            raise UnregisteredRecordKindError(
                f"Unsupported record type '{type_name}'."
            ) from exc


class Sink(Protocol):
    """
    Storage destination for one record of a given kind.
    """

    def save(self, record: Any) -> Any:
        ...


class RepositorySink:
    """
    Persist records through a repository, committing each save on its own.
    """

    def __init__(self, *, session: Session, repository: EntityRepository[Any]) -> None:
        self._session = session
        self._repository = repository

    def save(self, record: Any) -> Any:
        try:
            saved = self._repository.save(record)
            self._session.commit()
            return saved
        except SQLAlchemyError as exc:
            self._session.rollback()
            raise FixturePersistenceError(f"Failed to save {record!r}: {exc}") from exc


class SinkRegistry:
    """
    Mapping from record kind to its sink.
    """

    def __init__(self, sinks: Mapping[RecordKind, Sink] | None = None) -> None:
        self._sinks: dict[RecordKind, Sink] = dict(sinks or {})

    def register(self, kind: RecordKind, sink: Sink) -> None:
        self._sinks[kind] = sink

    def sink_for(self, kind: RecordKind | str) -> Sink:
        try:
            resolved = RecordKind(kind)
        except ValueError as exc:
            raise UnregisteredRecordKindError(f"Unknown record kind '{kind}'.") from exc

        sink = self._sinks.get(resolved)
        if sink is None:
            raise UnregisteredRecordKindError(
                f"No sink registered for record kind '{resolved.value}'."
            )
        return sink


def build_sink_registry(session: Session) -> SinkRegistry:
    """
    Wire every record kind to its repository on ``session``.
    """

    repositories: dict[RecordKind, EntityRepository[Any]] = {
        RecordKind.USER: UserRepository(session),
        RecordKind.GOAL: GoalRepository(session),
        RecordKind.METRIC: MetricRepository(session),
        RecordKind.GOAL_METRIC: GoalMetricRepository(session),
    }
    return SinkRegistry(
        {
            kind: RepositorySink(session=session, repository=repository)
            for kind, repository in repositories.items()
        }
    )
