"""
tests/test_fixture_bootstrap.py

End-to-end fixture seeding into an in-memory SQLite database.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from sqlalchemy.orm import Session, sessionmaker

from app.config import FixtureSettings
from app.domain.fixture_loading import FailurePolicy, FixturePolicies
from app.fixtures.errors import FixturePersistenceError
from app.services.fixture_bootstrap import load_fixtures, run_startup_fixtures
from db.models import GoalMetricKey
from db.repositories import (
    GoalMetricRepository,
    GoalRepository,
    MetricRepository,
    UserRepository,
)

SAMPLE_FIXTURE_DIR = Path(__file__).resolve().parents[1] / "resources" / "testDatabase"


def _settings(fixture_dir: Path, **overrides: object) -> FixtureSettings:
    return FixtureSettings(fixture_dir=fixture_dir, **overrides)  # type: ignore[arg-type]


def test_sample_fixtures_seed_every_table(session: Session) -> None:
    summary = load_fixtures(db=session, settings=_settings(SAMPLE_FIXTURE_DIR))

    assert summary.files_discovered == 4
    assert summary.files_loaded == 4
    assert summary.records_saved == 11
    assert summary.skipped_files == []

    assert UserRepository(session).count() == 3
    assert MetricRepository(session).count() == 3
    assert GoalRepository(session).count() == 2
    links = GoalMetricRepository(session)
    assert links.count() == 3
    assert links.exists(GoalMetricKey(metric_id=12, goal_id=100))
    assert links.exists(GoalMetricKey(metric_id=10, goal_id=101))


def test_reloading_sample_fixtures_is_idempotent(session: Session) -> None:
    settings = _settings(SAMPLE_FIXTURE_DIR)

    load_fixtures(db=session, settings=settings)
    load_fixtures(db=session, settings=settings)

    assert UserRepository(session).count() == 3
    assert GoalMetricRepository(session).count() == 3


def test_goal_nesting_a_stored_metric_keeps_its_values(tmp_path: Path, session: Session) -> None:
    (tmp_path / "UserContainer.xml").write_text(
        "<users><user><userId>1</userId><username>ann</username><email>ann@x.io</email></user></users>",
        encoding="utf-8",
    )
    (tmp_path / "MetricContainer.xml").write_text(
        """
        <metrics>
            <metric>
                <metricId>11</metricId><name>Sleep</name><unit>hours</unit>
                <targetValue>8</targetValue><currentValue>6.5</currentValue>
            </metric>
            <metric><metricId>12</metricId><name>Naps</name><unit>count</unit></metric>
        </metrics>
        """,
        encoding="utf-8",
    )
    (tmp_path / "GoalContainer.xml").write_text(
        """
        <goals>
            <goal>
                <goalId>100</goalId><userId>1</userId><title>Rest</title>
                <metrics>
                    <metric><metricId>11</metricId><name>Hours slept</name></metric>
                    <metric><metricId>12</metricId></metric>
                </metrics>
            </goal>
        </goals>
        """,
        encoding="utf-8",
    )

    summary = load_fixtures(db=session, settings=_settings(tmp_path))

    assert summary.skipped_files == []
    metrics = MetricRepository(session)
    renamed = metrics.require(11)
    assert renamed.name == "Hours slept"
    assert renamed.unit == "hours"
    assert renamed.target_value == 8.0
    assert renamed.current_value == 6.5
    referenced = metrics.require(12)
    assert referenced.name == "Naps"
    assert referenced.unit == "count"
    links = GoalMetricRepository(session)
    assert links.exists(GoalMetricKey(metric_id=11, goal_id=100))
    assert links.exists(GoalMetricKey(metric_id=12, goal_id=100))


def test_startup_hook_fires_once_per_process(session_factory: sessionmaker) -> None:
    settings = _settings(SAMPLE_FIXTURE_DIR)

    first = run_startup_fixtures(session_factory=session_factory, settings=settings)
    second = run_startup_fixtures(session_factory=session_factory, settings=settings)

    assert first is not None
    assert first.records_saved == 11
    assert second is None


def test_startup_hook_disabled(session_factory: sessionmaker) -> None:
    settings = _settings(SAMPLE_FIXTURE_DIR, enabled=False)

    assert run_startup_fixtures(session_factory=session_factory, settings=settings) is None


def test_startup_hook_swallows_fixture_errors(
    tmp_path: Path,
    session_factory: sessionmaker,
    caplog: pytest.LogCaptureFixture,
) -> None:
    (tmp_path / "UnknownContainer.xml").write_text("<x/>", encoding="utf-8")
    settings = _settings(
        tmp_path,
        policies=FixturePolicies(unknown_container=FailurePolicy.RAISE),
    )

    result = run_startup_fixtures(session_factory=session_factory, settings=settings)

    assert result is None
    assert "Unable to store fixture data" in caplog.text


def test_persistence_failure_rolls_back_and_aborts(tmp_path: Path, session: Session) -> None:
    (tmp_path / "UserContainer.xml").write_text(
        """
        <users>
            <user><userId>1</userId><username>dup</username><email>a@x.io</email></user>
            <user><userId>2</userId><username>dup</username><email>b@x.io</email></user>
            <user><userId>3</userId><username>cy</username><email>c@x.io</email></user>
        </users>
        """,
        encoding="utf-8",
    )

    with pytest.raises(FixturePersistenceError):
        load_fixtures(db=session, settings=_settings(tmp_path))

    repository = UserRepository(session)
    assert repository.count() == 1
    assert repository.get(3) is None
