"""
Fixture loading exceptions.
"""

from __future__ import annotations


class FixtureError(Exception):
    """Base exception for fixture loading failures."""


class FixtureResourceError(FixtureError):
    """Raised when a fixture file handle is missing. Aborts the run."""


class UnknownContainerError(FixtureError):
    """Raised when a fixture file name does not map to a registered container."""


class MalformedFixtureError(FixtureError):
    """Raised when a fixture file cannot be read, parsed or validated."""


class UnregisteredRecordKindError(FixtureError):
    """Raised when no storage sink is registered for a record's kind."""


class FixturePersistenceError(FixtureError):
    """Raised when a sink fails to persist a record."""


class FixtureLoaderStateError(FixtureError):
    """Raised when a loader is run more than once."""
