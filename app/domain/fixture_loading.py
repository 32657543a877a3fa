"""
app/domain/fixture_loading.py

Domain types for the startup fixture loading run.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class FailurePolicy(str, Enum):
    """
    What the loader does when one stage fails for a file or record.
    """

    SKIP = "skip"
    RAISE = "raise"

    @classmethod
    def parse(cls, raw: str | None, default: "FailurePolicy") -> "FailurePolicy":
        if raw is None:
            return default
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return default


class LoaderState(str, Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    DONE = "done"


@dataclass(frozen=True)
class FixturePolicies:
    """
    Failure policy per stage. Defaults skip bad files and unknown record kinds
    and abort the run on the first persistence failure.
    """

    unknown_container: FailurePolicy = FailurePolicy.SKIP
    malformed_content: FailurePolicy = FailurePolicy.SKIP
    unregistered_kind: FailurePolicy = FailurePolicy.SKIP
    persistence_error: FailurePolicy = FailurePolicy.RAISE


@dataclass(frozen=True)
class SkippedFixture:
    """
    One fixture file that contributed no records.
    """

    file_name: str
    reason: str
    message: str


@dataclass(frozen=True)
class FixtureLoadSummary:
    """
    End-of-run fixture loading summary.
    """

    files_discovered: int
    files_loaded: int
    records_saved: int
    records_skipped: int = 0
    records_failed: int = 0
    skipped_files: list[SkippedFixture] = field(default_factory=list)
