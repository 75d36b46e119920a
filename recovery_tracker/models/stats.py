"""
Aggregate result models.

Every model here is a plain value object: all numbers, strings, booleans and
nested records, so ``model_dump(mode="json", by_alias=True)`` is directly
JSON-serializable. Rates are percentages already rounded by the aggregator.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel

from recovery_tracker.models.base import RECORD_CONFIG
from recovery_tracker.models.core import Core
from recovery_tracker.models.landpad import LandpadStats
from recovery_tracker.models.launch import RecoveryAttemptEvent


class FleetStats(BaseModel):
    """Fleet-wide booster counts and the reuse champion.

    Attributes:
        total: Number of cores.
        active / retired / lost: Per-status counts (``unknown`` is not broken out).
        total_flights: Sum of ``reuse_count + 1`` over all cores.
        total_landing_attempts: Sum of RTLS + ASDS attempts.
        total_landing_successes: Sum of RTLS + ASDS landings.
        landing_success_rate: Percent, 2 decimals; ``0.0`` with no attempts.
        max_reuse: Highest ``reuse_count`` seen.
        most_reused_core: First core reaching ``max_reuse``; ``None`` if no
            core has been reused.
    """

    model_config = RECORD_CONFIG

    total: int = 0
    active: int = 0
    retired: int = 0
    lost: int = 0
    total_flights: int = 0
    total_landing_attempts: int = 0
    total_landing_successes: int = 0
    landing_success_rate: float = 0.0
    max_reuse: int = 0
    most_reused_core: Optional[Core] = None


class YearlyTrend(BaseModel):
    """Recovery attempts and successes for one calendar year (UTC)."""

    model_config = RECORD_CONFIG

    year: int
    attempts: int
    successes: int
    success_rate: float


class LandingTypeStats(BaseModel):
    """Attempts and successes for one landing-type bucket."""

    model_config = RECORD_CONFIG

    landing_type: str
    description: str
    attempts: int = 0
    successes: int = 0
    success_rate: float = 0.0


class FailureSummary(BaseModel):
    """Failed landings among all recovery attempts."""

    model_config = RECORD_CONFIG

    failures: int = 0
    attempts: int = 0
    failure_rate: float = 0.0


class RecoveryReport(BaseModel):
    """Every analytics view computed over one fetched snapshot.

    Built by ``analysis.report.build_recovery_report``; consumed by the CLI
    formatters, the JSON export, and the dashboard.
    """

    model_config = RECORD_CONFIG

    fleet: FleetStats
    cores: list[Core]
    landpads: list[LandpadStats]
    recoveries: list[RecoveryAttemptEvent]
    yearly_trend: list[YearlyTrend]
    landing_type_counts: dict[str, int]
    landing_types: list[LandingTypeStats]
    reuse_distribution: dict[int, int]
    average_reuse: float
    top_reused: list[Core]
    active_cores: list[Core]
    failures: FailureSummary
    recent_recoveries: list[RecoveryAttemptEvent]
    recent_failures: list[RecoveryAttemptEvent]
