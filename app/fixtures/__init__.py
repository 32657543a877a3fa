"""
Startup fixture loading.
"""

from app.fixtures.containers import (
    FixtureContainer,
    GoalContainer,
    GoalMetricContainer,
    MetricContainer,
    UserContainer,
    parse_container,
)
from app.fixtures.discovery import discover_fixture_files
from app.fixtures.errors import (
    FixtureError,
    FixtureLoaderStateError,
    FixturePersistenceError,
    FixtureResourceError,
    MalformedFixtureError,
    UnknownContainerError,
    UnregisteredRecordKindError,
)
from app.fixtures.loader import FixtureLoader
from app.fixtures.registry import ContainerRegistry, container_name_for
from app.fixtures.sinks import RecordKind, RepositorySink, Sink, SinkRegistry, build_sink_registry

__all__ = [
    "ContainerRegistry",
    "FixtureContainer",
    "FixtureError",
    "FixtureLoader",
    "FixtureLoaderStateError",
    "FixturePersistenceError",
    "FixtureResourceError",
    "GoalContainer",
    "GoalMetricContainer",
    "MalformedFixtureError",
    "MetricContainer",
    "RecordKind",
    "RepositorySink",
    "Sink",
    "SinkRegistry",
    "UnknownContainerError",
    "UnregisteredRecordKindError",
    "UserContainer",
    "build_sink_registry",
    "container_name_for",
    "discover_fixture_files",
    "parse_container",
]
