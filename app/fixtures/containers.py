"""
app/fixtures/containers.py

Deserialization targets for fixture files.

Each container corresponds to one ``<Name>Container.xml`` file layout and knows
how to flatten itself into the business records it holds.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, ClassVar

from pydantic import ValidationError

from app.fixtures.errors import FixtureResourceError, MalformedFixtureError
from app.fixtures.schemas import (
    FixtureRecord,
    GoalFixture,
    GoalMetricFixture,
    MetricFixture,
    UserFixture,
)
from db.base import Base


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def element_fields(element: ET.Element) -> dict[str, Any]:
    """
    Collect an item element's attributes and leaf child values.

    Child elements that have children of their own are left to the caller.
    Empty leaves are omitted so schema defaults apply.
    """

    fields: dict[str, Any] = {
        _local_name(name): value for name, value in element.attrib.items()
    }
    for child in list(element):
        if len(child):
            continue
        text = (child.text or "").strip()
        if text:
            fields[_local_name(child.tag)] = text
    return fields


class FixtureContainer(ABC):
    """
    Polymorphic deserialization target for one fixture file.
    """

    root_tag: ClassVar[str]

    @classmethod
    @abstractmethod
    def from_element(cls, root: ET.Element) -> "FixtureContainer":
        """
        Build the container from a parsed document root.
        """

    @abstractmethod
    def all_records(self) -> list[Base]:
        """
        Flatten the container into its business records, in document order.
        """


@dataclass
class RecordListContainer(FixtureContainer):
    """
    Container holding a flat list of one record schema.
    """

    item_tag: ClassVar[str]
    schema: ClassVar[type[FixtureRecord]]

    rows: list[Any] = field(default_factory=list)

    @classmethod
    def from_element(cls, root: ET.Element) -> "RecordListContainer":
        rows = [
            cls.schema.model_validate(element_fields(item))
            for item in root
            if _local_name(item.tag) == cls.item_tag
        ]
        return cls(rows=rows)

    def all_records(self) -> list[Base]:
        return [row.to_entity() for row in self.rows]


@dataclass
class UserContainer(RecordListContainer):
    root_tag: ClassVar[str] = "users"
    item_tag: ClassVar[str] = "user"
    schema: ClassVar[type[FixtureRecord]] = UserFixture


@dataclass
class MetricContainer(RecordListContainer):
    root_tag: ClassVar[str] = "metrics"
    item_tag: ClassVar[str] = "metric"
    schema: ClassVar[type[FixtureRecord]] = MetricFixture


@dataclass
class GoalMetricContainer(RecordListContainer):
    root_tag: ClassVar[str] = "goalMetrics"
    item_tag: ClassVar[str] = "goalMetric"
    schema: ClassVar[type[FixtureRecord]] = GoalMetricFixture


@dataclass
class GoalContainer(FixtureContainer):
    """
    Goals with optional nested metrics.

    Flattens each goal to the goal itself, then the nested metrics it defines,
    then one association row per nested metric. A nested metric given only by
    id is a reference and yields just its association row.
    """

    root_tag: ClassVar[str] = "goals"

    goals: list[GoalFixture] = field(default_factory=list)

    @classmethod
    def from_element(cls, root: ET.Element) -> "GoalContainer":
        goals: list[GoalFixture] = []
        for item in root:
            if _local_name(item.tag) != "goal":
                continue
            payload = element_fields(item)
            nested = [
                element_fields(metric)
                for wrapper in item
                if _local_name(wrapper.tag) == "metrics"
                for metric in wrapper
                if _local_name(metric.tag) == "metric"
            ]
            if nested:
                payload["metrics"] = nested
            goals.append(GoalFixture.model_validate(payload))
        return cls(goals=goals)

    def all_records(self) -> list[Base]:
        records: list[Base] = []
        for goal in self.goals:
            records.append(goal.to_entity())
            records.extend(
                metric.to_entity() for metric in goal.metrics if not metric.is_reference
            )
            records.extend(link.to_entity() for link in goal.metric_links())
        return records


def parse_container(path: Path | None, container_cls: type[FixtureContainer]) -> FixtureContainer:
    """
    Parse one fixture file into ``container_cls``.

    A missing file handle raises FixtureResourceError. Unreadable content,
    XML syntax errors, an unexpected root element and schema violations raise
    MalformedFixtureError.
    """

    if path is None or not path.is_file():
        raise FixtureResourceError(f"Fixture resource is invalid: {path}")

    try:
        root = ET.parse(path).getroot()
    except ET.ParseError as exc:
        raise MalformedFixtureError(f"{path.name}: invalid XML ({exc}).") from exc
    except OSError as exc:
        raise MalformedFixtureError(f"{path.name}: unable to read fixture file.") from exc

    root_name = _local_name(root.tag)
    if root_name != container_cls.root_tag:
        raise MalformedFixtureError(
            f"{path.name}: expected root element <{container_cls.root_tag}>, found <{root_name}>."
        )

    try:
        return container_cls.from_element(root)
    except ValidationError as exc:
        raise MalformedFixtureError(
            f"{path.name}: {exc.error_count()} validation error(s): {exc}"
        ) from exc
