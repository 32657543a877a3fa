"""
API schema exports.
"""

from app.schemas.fixture_loading import (
    FixtureLoadSummaryResponse,
    HealthResponse,
    SkippedFixtureResponse,
)

__all__ = [
    "FixtureLoadSummaryResponse",
    "HealthResponse",
    "SkippedFixtureResponse",
]
