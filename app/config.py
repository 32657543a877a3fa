"""
app/config.py

Application-level configuration helpers.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path

from app.domain.fixture_loading import FailurePolicy, FixturePolicies
from db.config import load_env_files, project_root

DEFAULT_FIXTURE_DIR = "resources/testDatabase"
DEFAULT_FIXTURE_SUFFIX = "Container"
DEFAULT_LOAD_ORDER: tuple[str, ...] = (
    "UserContainer",
    "MetricContainer",
    "GoalContainer",
    "GoalMetricContainer",
)


@lru_cache(maxsize=1)
def _load_env_once() -> None:
    """
    Ensure project `.env` files are loaded once before reading app settings.
    """

    load_env_files()


def _get_bool_env(name: str, default: bool) -> bool:
    """
    Read a boolean from environment variables with safe fallback.
    """

    _load_env_once()
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    return raw_value.strip().lower() in {"1", "true", "yes", "on"}


def _get_str_env(name: str, default: str) -> str:
    """
    Read a string from environment variables with fallback.
    """

    _load_env_once()
    value = os.getenv(name)
    if value is None:
        return default
    stripped = value.strip()
    return stripped if stripped else default


def _get_list_env(name: str, default: tuple[str, ...]) -> tuple[str, ...]:
    """
    Read a comma-separated list from environment variables.
    """

    _load_env_once()
    raw_value = os.getenv(name)
    if raw_value is None or not raw_value.strip():
        return default
    return tuple(item.strip() for item in raw_value.split(",") if item.strip())


def _get_policy_env(name: str, default: FailurePolicy) -> FailurePolicy:
    _load_env_once()
    return FailurePolicy.parse(os.getenv(name), default)


def _resolve_path(raw_path: str) -> Path:
    candidate = Path(raw_path)
    if candidate.is_absolute():
        return candidate
    return (project_root() / candidate).resolve()


@dataclass(frozen=True)
class FixtureSettings:
    """
    Runtime settings for the startup fixture loader.
    """

    enabled: bool = True
    fixture_dir: Path = field(default_factory=lambda: _resolve_path(DEFAULT_FIXTURE_DIR))
    file_suffix: str = DEFAULT_FIXTURE_SUFFIX
    load_order: tuple[str, ...] = DEFAULT_LOAD_ORDER
    policies: FixturePolicies = field(default_factory=FixturePolicies)


@lru_cache(maxsize=1)
def get_fixture_settings() -> FixtureSettings:
    """
    Return cached fixture loader settings from environment variables.
    """

    return FixtureSettings(
        enabled=_get_bool_env("FIXTURES_ENABLED", True),
        fixture_dir=_resolve_path(_get_str_env("FIXTURES_DIR", DEFAULT_FIXTURE_DIR)),
        file_suffix=_get_str_env("FIXTURES_FILE_SUFFIX", DEFAULT_FIXTURE_SUFFIX),
        load_order=_get_list_env("FIXTURES_LOAD_ORDER", DEFAULT_LOAD_ORDER),
        policies=FixturePolicies(
            unknown_container=_get_policy_env(
                "FIXTURES_ON_UNKNOWN_CONTAINER",
                FailurePolicy.SKIP,
            ),
            malformed_content=_get_policy_env(
                "FIXTURES_ON_MALFORMED_CONTENT",
                FailurePolicy.SKIP,
            ),
            unregistered_kind=_get_policy_env(
                "FIXTURES_ON_UNREGISTERED_KIND",
                FailurePolicy.SKIP,
            ),
            persistence_error=_get_policy_env(
                "FIXTURES_ON_PERSISTENCE_ERROR",
                FailurePolicy.RAISE,
            ),
        ),
    )
