"""
db/config.py

Where the Habicus database lives.

Settings come from the process environment, topped up from `.env` and
`.env.local` at the project root. Those files also carry the `FIXTURES_*`
switches read by `app.config`, so they are loaded before either module reads
the environment.

A server deployment points at PostgreSQL. Development and fixture seeding may
use an embedded SQLite file instead.
"""

from __future__ import annotations

import os
from pathlib import Path

ENV_FILES = (".env", ".env.local")
HOSTED_ENVIRONMENTS = frozenset({"prod", "production", "staging", "cloud"})


def project_root() -> Path:
    return Path(__file__).resolve().parents[1]


def load_env_files(root: Path | None = None) -> None:
    """
    Copy KEY=VALUE pairs from the env files into os.environ.

    Variables already set in the process win over the files.
    """

    base = root or project_root()
    for filename in ENV_FILES:
        env_path = base / filename
        if not env_path.is_file():
            continue

        for raw_line in env_path.read_text(encoding="utf-8").splitlines():
            line = raw_line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue

            key, value = line.split("=", 1)
            key = key.strip()
            if key and key not in os.environ:
                os.environ[key] = value.strip().strip('"').strip("'")


def normalize_postgres_url(url: str) -> str:
    """
    Point postgres URLs at the psycopg driver. Other URLs pass through.
    """

    for prefix in ("postgres://", "postgresql://"):
        if url.startswith(prefix):
            return "postgresql+psycopg://" + url[len(prefix):]
    return url


def is_embedded_url(url: str) -> bool:
    return url.startswith("sqlite")


def configured_database_urls() -> dict[str, str]:
    """
    Non-empty database URL variables, keyed by variable name.
    """

    names = ("DATABASE_URL", "CLOUD_DATABASE_URL", "LOCAL_DATABASE_URL")
    return {name: os.environ[name].strip() for name in names if os.getenv(name, "").strip()}


def resolve_database_url() -> str:
    """
    Pick the database URL for this process.

    DATABASE_URL wins. Otherwise CLOUD_DATABASE_URL is used when ENVIRONMENT
    names a hosted deployment, and LOCAL_DATABASE_URL in every other case.
    """

    load_env_files()
    urls = configured_database_urls()

    if "DATABASE_URL" in urls:
        return normalize_postgres_url(urls["DATABASE_URL"])

    environment = os.getenv("ENVIRONMENT", "local").strip().lower()
    if environment in HOSTED_ENVIRONMENTS and "CLOUD_DATABASE_URL" in urls:
        return normalize_postgres_url(urls["CLOUD_DATABASE_URL"])

    if "LOCAL_DATABASE_URL" in urls:
        return normalize_postgres_url(urls["LOCAL_DATABASE_URL"])

    raise RuntimeError(
        "No Habicus database configured. Set DATABASE_URL, or LOCAL_DATABASE_URL "
        "(for example sqlite:///habicus.db) / CLOUD_DATABASE_URL."
    )
