"""
Fixture file discovery.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from app.fixtures.registry import FIXTURE_EXTENSION, container_name_for

logger = logging.getLogger(__name__)


def discover_fixture_files(
    fixture_dir: Path,
    *,
    suffix: str,
    load_order: Sequence[str] = (),
) -> list[Path]:
    """
    List ``*<suffix>.xml`` files in ``fixture_dir``.

    Files named in ``load_order`` come first, in that order; the rest follow
    alphabetically. A missing directory yields no files.
    """

    if not fixture_dir.is_dir():
        logger.info("Fixture directory not found, nothing to load: %s", fixture_dir)
        return []

    pattern = f"*{suffix}{FIXTURE_EXTENSION}"
    files = [path for path in fixture_dir.glob(pattern) if path.is_file()]

    rank = {name: index for index, name in enumerate(load_order)}
    return sorted(
        files,
        key=lambda path: (
            rank.get(container_name_for(path.name), len(rank)),
            path.name,
        ),
    )
