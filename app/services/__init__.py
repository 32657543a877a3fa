"""
app/services package marker.
"""

from app.services.fixture_bootstrap import load_fixtures, run_startup_fixtures

__all__ = [
    "load_fixtures",
    "run_startup_fixtures",
]
