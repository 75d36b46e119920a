"""
Fleet statistics aggregator and reuse analytics.

``analyze_fleet_stats`` is a single left-to-right pass. The reuse champion
is updated only on a strictly greater ``reuse_count``, so the first core to
reach the maximum keeps the title. Because the running maximum starts at
``0``, a fleet in which no core has been reused has no champion.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from recovery_tracker.analysis.ranking import rank_by
from recovery_tracker.analysis.rates import percentage
from recovery_tracker.models.core import Core
from recovery_tracker.models.stats import FleetStats

logger = logging.getLogger(__name__)


def analyze_fleet_stats(cores: Sequence[Core]) -> FleetStats:
    """Reduce the core collection to fleet-wide counts and rates.

    Args:
        cores: Normalized cores. May be empty.

    Returns:
        FleetStats; all-zero with ``most_reused_core=None`` for an empty fleet.
    """
    status_counts = {"active": 0, "retired": 0, "lost": 0}
    total_flights = 0
    attempts = 0
    successes = 0
    max_reuse = 0
    most_reused = None

    for core in cores:
        if core.status in status_counts:
            status_counts[core.status] += 1

        total_flights += core.total_flights
        attempts += core.landing_attempts
        successes += core.landing_successes

        if core.reuse_count > max_reuse:
            max_reuse = core.reuse_count
            most_reused = core

    stats = FleetStats(
        total=len(cores),
        active=status_counts["active"],
        retired=status_counts["retired"],
        lost=status_counts["lost"],
        total_flights=total_flights,
        total_landing_attempts=attempts,
        total_landing_successes=successes,
        landing_success_rate=percentage(successes, attempts, digits=2),
        max_reuse=max_reuse,
        most_reused_core=most_reused,
    )
    logger.info(
        "Fleet stats: %d cores, %d/%d landings (%.2f%%), max reuse %d",
        stats.total, successes, attempts, stats.landing_success_rate, max_reuse,
    )
    return stats


def reuse_distribution(cores: Sequence[Core]) -> dict[int, int]:
    """Count cores per ``reuse_count``, with every value from 0 to the max.

    Gaps are filled with ``0`` so a bar chart has one row per reuse level.
    An empty fleet yields ``{}``.
    """
    if not cores:
        return {}
    counts: dict[int, int] = {}
    for core in cores:
        counts[core.reuse_count] = counts.get(core.reuse_count, 0) + 1
    return {level: counts.get(level, 0) for level in range(max(counts) + 1)}


def average_reuse(cores: Sequence[Core]) -> float:
    """Mean ``reuse_count`` per core, 2 decimals; ``0.0`` for an empty fleet."""
    if not cores:
        return 0.0
    return round(sum(c.reuse_count for c in cores) / len(cores), 2)


def top_reused_cores(cores: Sequence[Core], n: int) -> list[Core]:
    """The ``n`` most reused cores; cores never reused are excluded.

    Ties keep input order.
    """
    return rank_by((c for c in cores if c.reuse_count > 0), key=lambda c: c.reuse_count, n=n)


def active_cores(cores: Sequence[Core]) -> list[Core]:
    """Active cores, most reused first."""
    return rank_by((c for c in cores if c.status == "active"), key=lambda c: c.reuse_count)


def dashboard_cores(cores: Sequence[Core], n: int) -> list[Core]:
    """Leaderboard for the web dashboard: reused or still-active cores, top ``n``."""
    return rank_by(
        (c for c in cores if c.reuse_count > 0 or c.status == "active"),
        key=lambda c: c.reuse_count,
        n=n,
    )
