"""
Container registry mapping fixture file names to deserialization targets.
"""

from __future__ import annotations

from collections.abc import Mapping

from app.fixtures.containers import (
    FixtureContainer,
    GoalContainer,
    GoalMetricContainer,
    MetricContainer,
    UserContainer,
)
from app.fixtures.errors import UnknownContainerError

FIXTURE_EXTENSION = ".xml"


def container_name_for(file_name: str) -> str:
    """
    Strip the trailing ``.xml`` so the bare name can be resolved.
    """

    if file_name.lower().endswith(FIXTURE_EXTENSION):
        return file_name[: -len(FIXTURE_EXTENSION)]
    return file_name


class ContainerRegistry:
    """
    Explicit table of container name -> container class.
    """

    def __init__(self, registrations: Mapping[str, type[FixtureContainer]] | None = None) -> None:
        builtins: dict[str, type[FixtureContainer]] = {
            "UserContainer": UserContainer,
            "MetricContainer": MetricContainer,
            "GoalContainer": GoalContainer,
            "GoalMetricContainer": GoalMetricContainer,
        }
        if registrations:
            builtins.update(registrations)
        self._registrations = builtins

    def register(self, *, name: str, container_cls: type[FixtureContainer]) -> None:
        self._registrations[name.strip()] = container_cls

    def names(self) -> list[str]:
        return sorted(self._registrations)

    def resolve(self, name: str) -> type[FixtureContainer]:
        resolved = self._registrations.get(name)
        if resolved is None:
            allowed = ", ".join(self.names())
            raise UnknownContainerError(
                f"No fixture container registered for '{name}'. Known containers: {allowed}."
            )
        return resolved

    def resolve_file(self, file_name: str) -> type[FixtureContainer]:
        return self.resolve(container_name_for(file_name))
