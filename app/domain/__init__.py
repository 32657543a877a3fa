"""
app/domain package marker.
"""

from app.domain.fixture_loading import (
    FailurePolicy,
    FixtureLoadSummary,
    FixturePolicies,
    LoaderState,
    SkippedFixture,
)

__all__ = [
    "FailurePolicy",
    "FixtureLoadSummary",
    "FixturePolicies",
    "LoaderState",
    "SkippedFixture",
]
