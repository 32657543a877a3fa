"""
Load fixture files into the configured database from the CLI.
"""

from __future__ import annotations

import argparse
import json
from dataclasses import asdict, replace
from pathlib import Path

from app.config import get_fixture_settings
from app.logging_utils import configure_logging
from app.services.fixture_bootstrap import load_fixtures
from db.session import SessionLocal


def main() -> int:
    parser = argparse.ArgumentParser(description="Seed the database from fixture XML files.")
    parser.add_argument(
        "--fixture-dir",
        dest="fixture_dir",
        default=None,
        help="Directory holding *Container.xml files. Defaults to FIXTURES_DIR.",
    )
    parser.add_argument(
        "--create-schema",
        action="store_true",
        help="Create missing tables first (embedded development databases only).",
    )
    args = parser.parse_args()

    configure_logging()
    settings = get_fixture_settings()
    if args.fixture_dir:
        settings = replace(settings, fixture_dir=Path(args.fixture_dir).resolve())

    if args.create_schema:
        import db.models  # noqa: F401
        from db.base import Base
        from db.config import is_embedded_url
        from db.session import get_engine

        engine = get_engine()
        if not is_embedded_url(engine.url.render_as_string()):
            parser.error("--create-schema only applies to SQLite; run 'alembic upgrade head' instead.")
        Base.metadata.create_all(engine)

    with SessionLocal() as db:
        summary = load_fixtures(db=db, settings=settings)

    print(json.dumps(asdict(summary), indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
