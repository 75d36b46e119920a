"""
Derived trends over recovery-attempt events.

Both reductions are re-derivable from the flat event list and conserve the
event count: yearly attempts and landing-type buckets each sum to
``len(events)``.
"""

from __future__ import annotations

from collections.abc import Sequence

from recovery_tracker.analysis.rates import percentage
from recovery_tracker.models.launch import LANDING_TYPE_DESCRIPTIONS, LANDING_TYPES, RecoveryAttemptEvent
from recovery_tracker.models.stats import LandingTypeStats, YearlyTrend


def yearly_trend(events: Sequence[RecoveryAttemptEvent]) -> list[YearlyTrend]:
    """Attempts, successes and success rate per UTC calendar year.

    Years come from each event's own ``launch_date``. Only years with at
    least one attempt appear, ascending. Rates use 1 decimal.
    """
    buckets: dict[int, list[int]] = {}
    for event in events:
        tally = buckets.setdefault(event.launch_date.year, [0, 0])
        tally[0] += 1
        if event.succeeded:
            tally[1] += 1

    return [
        YearlyTrend(
            year=year,
            attempts=attempts,
            successes=successes,
            success_rate=percentage(successes, attempts, digits=1),
        )
        for year, (attempts, successes) in sorted(buckets.items())
    ]


def landing_type_distribution(events: Sequence[RecoveryAttemptEvent]) -> dict[str, int]:
    """Event count per landing-type bucket (``ASDS``, ``RTLS``, ``Ocean``).

    Events without a landing type count as ``Ocean``. Empty buckets are
    reported as ``0``.
    """
    counts = dict.fromkeys(LANDING_TYPES, 0)
    for event in events:
        counts[event.landing_bucket] += 1
    return counts


def landing_type_breakdown(events: Sequence[RecoveryAttemptEvent]) -> list[LandingTypeStats]:
    """Attempts, successes and success rate (1 decimal) per landing-type bucket."""
    attempts = dict.fromkeys(LANDING_TYPES, 0)
    successes = dict.fromkeys(LANDING_TYPES, 0)
    for event in events:
        attempts[event.landing_bucket] += 1
        if event.succeeded:
            successes[event.landing_bucket] += 1

    return [
        LandingTypeStats(
            landing_type=lt,
            description=LANDING_TYPE_DESCRIPTIONS[lt],
            attempts=attempts[lt],
            successes=successes[lt],
            success_rate=percentage(successes[lt], attempts[lt], digits=1),
        )
        for lt in LANDING_TYPES
    ]
