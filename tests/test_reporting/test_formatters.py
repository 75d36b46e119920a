"""Tests for recovery_tracker.reporting.formatters."""

from __future__ import annotations

from conftest import make_raw_launch
from recovery_tracker.analysis.launches import extract_recovery_attempts
from recovery_tracker.analysis.ranking import last_n
from recovery_tracker.analysis.trends import landing_type_breakdown
from recovery_tracker.ingestion.normalize import normalize_launches
from recovery_tracker.models.stats import FailureSummary, FleetStats
from recovery_tracker.reporting.formatters import (
    format_active_cores_table,
    format_failures,
    format_fleet_overview,
    format_landing_types,
    format_landpad_table,
    format_quick_overview,
    format_recent_recoveries,
    format_reuse_distribution,
    format_yearly_trend,
)


# ── Overviews ─────────────────────────────────────────────────────────────────


def test_quick_overview_fixture(fixture_report) -> None:
    """Quick overview shows success rate and champion serial."""
    text = format_quick_overview(fixture_report.fleet)
    assert "Booster Recovery Quick Overview" in text
    assert "Landing success:  96.43%" in text
    assert "Reuse champion:   B1049" in text


def test_quick_overview_without_champion() -> None:
    """No champion line when nothing has been reused."""
    text = format_quick_overview(FleetStats())
    assert "Reuse champion" not in text
    assert "Landing success:  0.00%" in text


def test_fleet_overview_counts(fixture_report) -> None:
    text = format_fleet_overview(fixture_report.fleet)
    assert "=== Fleet Overview ===" in text
    assert "Total flights:  29" in text
    assert "Lost:           1" in text
    assert "Champion:       B1049" in text


# ── Tables ────────────────────────────────────────────────────────────────────


def test_landpad_table_rows(fixture_report) -> None:
    """Each landpad appears once with its rate."""
    text = format_landpad_table(fixture_report.landpads)
    assert "=== Landpads ===" in text
    assert "OCISLY" in text
    assert "91.67%" in text
    assert "under constru" in text


def test_landpad_table_empty() -> None:
    assert "(no landpads)" in format_landpad_table([])


def test_active_cores_table(fixture_report) -> None:
    text = format_active_cores_table(fixture_report.active_cores)
    assert "B1049" in text
    assert "B1056" not in text
    assert "2 active core(s)" in text


def test_active_cores_table_empty() -> None:
    assert "(no active cores)" in format_active_cores_table([])


def test_recent_recoveries_newest_first(fixture_report) -> None:
    """The last event in source order is printed first."""
    recent = last_n(fixture_report.recoveries, 3)
    text = format_recent_recoveries(recent)
    assert text.index("Transporter-3") < text.index("Crew-1")
    assert "OK" in text


def test_recent_recoveries_marks_failures(fixture_report) -> None:
    text = format_recent_recoveries(fixture_report.recoveries[:1])
    assert "CRS-5" in text
    assert "FAIL" in text


def test_recent_recoveries_empty() -> None:
    assert "(no recovery attempts)" in format_recent_recoveries([])


def test_long_mission_name_truncated() -> None:
    """Names longer than the 30-char column end with '~'."""
    events = extract_recovery_attempts(
        normalize_launches([make_raw_launch(name="Crew Dragon In Flight Abort Test Mission")])
    )
    text = format_recent_recoveries(events)
    assert "Crew Dragon In Flight Abort T~" in text


# ── Trends ────────────────────────────────────────────────────────────────────


def test_yearly_trend_bars(fixture_report) -> None:
    """100% years get a full bar, 0% years an empty one."""
    text = format_yearly_trend(fixture_report.yearly_trend)
    assert "#" * 20 in text
    assert "." * 20 in text
    assert "2016" in text


def test_yearly_trend_empty() -> None:
    assert "(no recovery attempts)" in format_yearly_trend([])


def test_landing_types_hide_empty_buckets(fixture_report) -> None:
    text = format_landing_types(fixture_report.landing_types)
    assert "Ocean" in text
    assert "Return To Launch Site" in text


def test_landing_types_all_empty() -> None:
    assert "(no recovery attempts)" in format_landing_types(landing_type_breakdown([]))


def test_reuse_distribution(fixture_report) -> None:
    text = format_reuse_distribution(
        fixture_report.reuse_distribution,
        fixture_report.top_reused,
        fixture_report.average_reuse,
    )
    assert "Flown once" in text
    assert "Reused 9x" in text
    assert "Average reuse: 4.80 per core" in text
    assert "1. B1049" in text


def test_reuse_distribution_empty() -> None:
    assert "(no cores)" in format_reuse_distribution({}, [], 0.0)


# ── Failures ──────────────────────────────────────────────────────────────────


def test_failures_section(fixture_report) -> None:
    text = format_failures(fixture_report.recent_failures, fixture_report.failures)
    assert "Failures: 4 / 12 attempts" in text
    assert "Failure rate: 33.33%" in text
    assert text.index("Starlink-5") < text.index("CRS-5")


def test_failures_none_recorded() -> None:
    text = format_failures([], FailureSummary(failures=0, attempts=3, failure_rate=0.0))
    assert "No recovery failures recorded." in text
