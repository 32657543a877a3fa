"""
tests/test_db_setup.py

Database URL resolution, engine creation and the audit timestamp columns.
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest
from sqlalchemy.orm import Session

import db.session
from db.config import load_env_files, normalize_postgres_url, resolve_database_url
from db.models import Metric, User
from db.repositories import UserRepository
from db.session import create_db_engine

URL_VARS = ("DATABASE_URL", "CLOUD_DATABASE_URL", "LOCAL_DATABASE_URL", "ENVIRONMENT")


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in URL_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("db.config.load_env_files", lambda root=None: None)
    return monkeypatch


# ---------------------------------------------------------------------------
# URL resolution
# ---------------------------------------------------------------------------


def test_database_url_wins(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("DATABASE_URL", "postgres://u:p@db/habicus")
    clean_env.setenv("LOCAL_DATABASE_URL", "sqlite:///habicus.db")

    assert resolve_database_url() == "postgresql+psycopg://u:p@db/habicus"


def test_cloud_url_only_for_hosted_environments(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("CLOUD_DATABASE_URL", "postgresql://u:p@cloud/habicus")
    clean_env.setenv("LOCAL_DATABASE_URL", "sqlite:///habicus.db")

    assert resolve_database_url() == "sqlite:///habicus.db"

    clean_env.setenv("ENVIRONMENT", "Staging")
    assert resolve_database_url() == "postgresql+psycopg://u:p@cloud/habicus"


def test_missing_url_raises(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("LOCAL_DATABASE_URL", "   ")

    with pytest.raises(RuntimeError, match="No Habicus database configured"):
        resolve_database_url()


def test_normalize_leaves_other_drivers_alone() -> None:
    assert normalize_postgres_url("sqlite://") == "sqlite://"
    assert normalize_postgres_url("postgresql+psycopg://x/y") == "postgresql+psycopg://x/y"


def test_env_files_do_not_override_process_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / ".env").write_text(
        "# seeded by hand\nFIXTURES_DIR='fixtures'\nLOCAL_DATABASE_URL=sqlite:///from-file.db\n",
        encoding="utf-8",
    )
    monkeypatch.delenv("FIXTURES_DIR", raising=False)
    monkeypatch.setenv("LOCAL_DATABASE_URL", "sqlite:///from-process.db")

    load_env_files(tmp_path)

    assert os.environ["FIXTURES_DIR"] == "fixtures"
    assert os.environ["LOCAL_DATABASE_URL"] == "sqlite:///from-process.db"
    monkeypatch.delenv("FIXTURES_DIR")


# ---------------------------------------------------------------------------
# Engine and session module
# ---------------------------------------------------------------------------


def test_sqlite_engine_skips_pool_tuning() -> None:
    engine = create_db_engine("sqlite://")
    try:
        assert engine.dialect.name == "sqlite"
    finally:
        engine.dispose()


def test_unsupported_url_is_rejected() -> None:
    with pytest.raises(RuntimeError, match="PostgreSQL or SQLite"):
        create_db_engine("mysql://u:p@db/habicus")


def test_session_module_exposes_only_explicit_accessors() -> None:
    assert not hasattr(db.session, "engine")
    assert not hasattr(db.session, "get_db")
    assert callable(db.session.get_engine)
    assert callable(db.session.SessionLocal)


# ---------------------------------------------------------------------------
# Audit timestamps
# ---------------------------------------------------------------------------


def test_database_stamps_created_at(session: Session) -> None:
    repository = UserRepository(session)
    user = repository.save(User(user_id=1, username="ann", email="ann@x.io"))
    session.commit()
    session.refresh(user)

    assert user.created_at is not None
    assert user.updated_at is not None


def test_unchanged_merge_keeps_created_at(session: Session) -> None:
    session.merge(Metric(metric_id=1, name="Steps"))
    session.commit()
    first = session.get(Metric, 1)
    session.refresh(first)
    created = first.created_at

    session.merge(Metric(metric_id=1, name="Steps"))
    session.commit()
    session.refresh(first)

    assert first.created_at == created
