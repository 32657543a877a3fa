"""
app/services/fixture_bootstrap.py

Startup hook that seeds the database from fixture files once per process.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable

from sqlalchemy.orm import Session

from app.config import FixtureSettings, get_fixture_settings
from app.domain.fixture_loading import FixtureLoadSummary
from app.fixtures import FixtureError, FixtureLoader, build_sink_registry

logger = logging.getLogger(__name__)

_fired = False
_fired_lock = threading.Lock()


def _claim_startup_run() -> bool:
    global _fired
    with _fired_lock:
        if _fired:
            return False
        _fired = True
        return True


def reset_startup_guard() -> None:
    """
    Allow the startup hook to fire again. Intended for tests.
    """

    global _fired
    with _fired_lock:
        _fired = False


def load_fixtures(
    *,
    db: Session,
    settings: FixtureSettings,
) -> FixtureLoadSummary:
    """
    Run one fixture load against ``db`` and return its summary.
    """

    loader = FixtureLoader(
        fixture_dir=settings.fixture_dir,
        sinks=build_sink_registry(db),
        file_suffix=settings.file_suffix,
        load_order=settings.load_order,
        policies=settings.policies,
    )
    return loader.run()


def run_startup_fixtures(
    *,
    session_factory: Callable[[], Session] | None = None,
    settings: FixtureSettings | None = None,
) -> FixtureLoadSummary | None:
    """
    Called once by the hosting process after it finishes starting up.

    Returns None when loading is disabled or the hook already fired. Fixture
    failures that escape the loader are logged and do not stop the host.
    """

    resolved_settings = settings or get_fixture_settings()
    if not resolved_settings.enabled:
        logger.info("Fixture loading disabled; skipping startup seed")
        return None

    if not _claim_startup_run():
        logger.debug("Startup fixtures already loaded for this process")
        return None

    if session_factory is None:
        from db.session import SessionLocal

        session_factory = SessionLocal

    with session_factory() as db:
        try:
            return load_fixtures(db=db, settings=resolved_settings)
        except FixtureError:
            logger.exception("Unable to store fixture data")
            return None
