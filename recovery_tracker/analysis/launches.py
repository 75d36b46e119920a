"""
Launch recovery extractor and failure analysis.

``extract_recovery_attempts`` flattens launch → core sub-records into one
``RecoveryAttemptEvent`` per attempted landing. Source order is preserved
(launch order, then core order within a launch); downstream "most recent N"
views treat position as recency.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from recovery_tracker.analysis.rates import percentage
from recovery_tracker.models.launch import Launch, RecoveryAttemptEvent
from recovery_tracker.models.stats import FailureSummary

logger = logging.getLogger(__name__)


def extract_recovery_attempts(launches: Sequence[Launch]) -> list[RecoveryAttemptEvent]:
    """Flatten launches into recovery-attempt events.

    Launches without cores, and core sub-records with
    ``landing_attempt=False``, contribute nothing.
    """
    events: list[RecoveryAttemptEvent] = []
    for launch in launches:
        for core in launch.cores:
            if not core.landing_attempt:
                continue
            events.append(
                RecoveryAttemptEvent(
                    launch_name=launch.name,
                    launch_date=launch.date_utc,
                    core_id=core.core_id,
                    flight_number=core.flight_number,
                    gridfins=core.gridfins,
                    legs=core.legs,
                    reused=core.reused,
                    landing_success=core.landing_success,
                    landing_type=core.landing_type,
                    landpad_id=core.landpad_id,
                )
            )
    logger.info(
        "Extracted %d recovery attempts from %d launches", len(events), len(launches)
    )
    return events


def recovery_failures(events: Sequence[RecoveryAttemptEvent]) -> list[RecoveryAttemptEvent]:
    """Attempted landings that did not succeed, in source order.

    An unknown outcome (``landing_success is None``) counts as a failure.
    """
    return [e for e in events if not e.succeeded]


def failure_summary(events: Sequence[RecoveryAttemptEvent]) -> FailureSummary:
    """Failure count and rate (percent, 2 decimals) over all attempts."""
    failures = len(recovery_failures(events))
    return FailureSummary(
        failures=failures,
        attempts=len(events),
        failure_rate=percentage(failures, len(events), digits=2),
    )
