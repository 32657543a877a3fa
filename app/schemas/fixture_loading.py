"""
app/schemas/fixture_loading.py

Response schemas for the health endpoint and fixture load reporting.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from app.domain.fixture_loading import FixtureLoadSummary


class SkippedFixtureResponse(BaseModel):
    file_name: str
    reason: str
    message: str


class FixtureLoadSummaryResponse(BaseModel):
    """
    API response model for one fixture load run.
    """

    files_discovered: int = Field(..., ge=0)
    files_loaded: int = Field(..., ge=0)
    records_saved: int = Field(..., ge=0)
    records_skipped: int = Field(default=0, ge=0)
    records_failed: int = Field(default=0, ge=0)
    skipped_files: list[SkippedFixtureResponse] = Field(default_factory=list)

    @classmethod
    def from_summary(cls, summary: FixtureLoadSummary) -> "FixtureLoadSummaryResponse":
        return cls(
            files_discovered=summary.files_discovered,
            files_loaded=summary.files_loaded,
            records_saved=summary.records_saved,
            records_skipped=summary.records_skipped,
            records_failed=summary.records_failed,
            skipped_files=[
                SkippedFixtureResponse(
                    file_name=item.file_name,
                    reason=item.reason,
                    message=item.message,
                )
                for item in summary.skipped_files
            ],
        )


class HealthResponse(BaseModel):
    status: str
    fixtures: FixtureLoadSummaryResponse | None = None
