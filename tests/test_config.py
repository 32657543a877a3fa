from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from app.config import DEFAULT_LOAD_ORDER, get_fixture_settings
from app.domain.fixture_loading import FailurePolicy


@pytest.fixture(autouse=True)
def _clear_settings_cache() -> Iterator[None]:
    get_fixture_settings.cache_clear()
    yield
    get_fixture_settings.cache_clear()


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "FIXTURES_ENABLED",
        "FIXTURES_DIR",
        "FIXTURES_FILE_SUFFIX",
        "FIXTURES_LOAD_ORDER",
        "FIXTURES_ON_UNKNOWN_CONTAINER",
        "FIXTURES_ON_MALFORMED_CONTENT",
        "FIXTURES_ON_UNREGISTERED_KIND",
        "FIXTURES_ON_PERSISTENCE_ERROR",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = get_fixture_settings()

    assert settings.enabled is True
    assert settings.fixture_dir.parts[-2:] == ("resources", "testDatabase")
    assert settings.file_suffix == "Container"
    assert settings.load_order == DEFAULT_LOAD_ORDER
    assert settings.policies.unknown_container is FailurePolicy.SKIP
    assert settings.policies.malformed_content is FailurePolicy.SKIP
    assert settings.policies.persistence_error is FailurePolicy.RAISE


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("FIXTURES_ENABLED", "false")
    monkeypatch.setenv("FIXTURES_DIR", str(tmp_path))
    monkeypatch.setenv("FIXTURES_LOAD_ORDER", " GoalContainer , UserContainer ,")
    monkeypatch.setenv("FIXTURES_ON_MALFORMED_CONTENT", "RAISE")
    monkeypatch.setenv("FIXTURES_ON_PERSISTENCE_ERROR", "skip")

    settings = get_fixture_settings()

    assert settings.enabled is False
    assert settings.fixture_dir == tmp_path
    assert settings.load_order == ("GoalContainer", "UserContainer")
    assert settings.policies.malformed_content is FailurePolicy.RAISE
    assert settings.policies.persistence_error is FailurePolicy.SKIP


def test_invalid_policy_falls_back_to_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FIXTURES_ON_UNKNOWN_CONTAINER", "explode")

    assert get_fixture_settings().policies.unknown_container is FailurePolicy.SKIP
