"""
Snapshot report builder.

Normalizes the three raw collections once and runs every analytics view
over them. The trend reductions wait on the extractor (their only data
dependency); everything else is independent.
"""

from __future__ import annotations

import logging
from typing import Any

from recovery_tracker.analysis.fleet import (
    active_cores,
    analyze_fleet_stats,
    average_reuse,
    reuse_distribution,
    top_reused_cores,
)
from recovery_tracker.analysis.landpads import analyze_landpad_stats
from recovery_tracker.analysis.launches import (
    extract_recovery_attempts,
    failure_summary,
    recovery_failures,
)
from recovery_tracker.analysis.ranking import last_n
from recovery_tracker.analysis.trends import (
    landing_type_breakdown,
    landing_type_distribution,
    yearly_trend,
)
from recovery_tracker.config import ReportConfig
from recovery_tracker.ingestion.normalize import (
    normalize_cores,
    normalize_landpads,
    normalize_launches,
)
from recovery_tracker.models.stats import RecoveryReport

logger = logging.getLogger(__name__)


def build_recovery_report(
    raw_cores: Any,
    raw_landpads: Any,
    raw_launches: Any,
    report_config: ReportConfig | None = None,
) -> RecoveryReport:
    """Normalize raw collections and compute every recovery view.

    Args:
        raw_cores:     Raw ``/cores`` response (list of dicts).
        raw_landpads:  Raw ``/landpads`` response.
        raw_launches:  Raw ``/launches/past`` response, chronological ascending.
        report_config: Row limits; defaults to ``ReportConfig()``.

    Returns:
        A fully populated ``RecoveryReport``.

    Raises:
        MissingCollectionError: If any collection is ``None`` or not a list.
        MalformedRecordError:   If any record lacks a required field.
    """
    limits = report_config or ReportConfig()

    cores = normalize_cores(raw_cores)
    landpads = normalize_landpads(raw_landpads)
    launches = normalize_launches(raw_launches)

    events = extract_recovery_attempts(launches)

    report = RecoveryReport(
        fleet=analyze_fleet_stats(cores),
        cores=cores,
        landpads=analyze_landpad_stats(landpads),
        recoveries=events,
        yearly_trend=yearly_trend(events),
        landing_type_counts=landing_type_distribution(events),
        landing_types=landing_type_breakdown(events),
        reuse_distribution=reuse_distribution(cores),
        average_reuse=average_reuse(cores),
        top_reused=top_reused_cores(cores, limits.top_reused_n),
        active_cores=active_cores(cores),
        failures=failure_summary(events),
        recent_recoveries=last_n(events, limits.recent_recoveries_n),
        recent_failures=last_n(recovery_failures(events), limits.recent_failures_n),
    )
    logger.info(
        "Recovery report built: %d cores, %d landpads, %d launches, %d recovery attempts",
        len(cores), len(landpads), len(launches), len(events),
    )
    return report
