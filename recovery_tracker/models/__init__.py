"""
Domain models — frozen pydantic records built fresh from every fetch.

Python attributes are snake_case; ``model_dump(mode="json", by_alias=True)``
produces the camelCase JSON shape consumed by the dashboard and export.
"""

from recovery_tracker.models.core import Core
from recovery_tracker.models.landpad import Landpad, LandpadStats
from recovery_tracker.models.launch import Launch, LaunchCore, RecoveryAttemptEvent
from recovery_tracker.models.stats import (
    FailureSummary,
    FleetStats,
    LandingTypeStats,
    RecoveryReport,
    YearlyTrend,
)

__all__ = [
    "Core",
    "FailureSummary",
    "FleetStats",
    "LandingTypeStats",
    "Landpad",
    "LandpadStats",
    "Launch",
    "LaunchCore",
    "RecoveryAttemptEvent",
    "RecoveryReport",
    "YearlyTrend",
]
