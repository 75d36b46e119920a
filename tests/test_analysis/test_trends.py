"""Tests for recovery_tracker/analysis/trends.py."""

from __future__ import annotations

from conftest import make_raw_launch, make_raw_launch_core
from recovery_tracker.analysis.launches import extract_recovery_attempts
from recovery_tracker.analysis.trends import (
    landing_type_breakdown,
    landing_type_distribution,
    yearly_trend,
)
from recovery_tracker.ingestion.normalize import normalize_launches


def _events(*raw_launches):
    return extract_recovery_attempts(normalize_launches(list(raw_launches)))


class TestYearlyTrend:
    def test_empty(self):
        assert yearly_trend([]) == []

    def test_years_sorted_and_rates_one_decimal(self):
        events = _events(
            make_raw_launch(date_utc="2021-05-01T00:00:00Z"),
            make_raw_launch(
                [
                    make_raw_launch_core(landing_success=True),
                    make_raw_launch_core(landing_success=False),
                    make_raw_launch_core(landing_success=True),
                ],
                date_utc="2019-05-01T00:00:00Z",
            ),
        )
        trend = yearly_trend(events)
        assert [t.year for t in trend] == [2019, 2021]
        assert (trend[0].attempts, trend[0].successes, trend[0].success_rate) == (3, 2, 66.7)
        assert trend[1].success_rate == 100.0

    def test_year_taken_in_utc(self):
        (row,) = yearly_trend(_events(make_raw_launch(date_utc="2020-12-31T23:30:00-05:00")))
        assert row.year == 2021

    def test_attempts_sum_to_event_count(self, fixture_report):
        assert sum(t.attempts for t in fixture_report.yearly_trend) == len(fixture_report.recoveries)

    def test_fixture_trend(self, fixture_report):
        rows = {t.year: (t.attempts, t.successes, t.success_rate) for t in fixture_report.yearly_trend}
        assert rows == {
            2015: (2, 1, 50.0),
            2016: (1, 0, 0.0),
            2018: (4, 3, 75.0),
            2019: (1, 1, 100.0),
            2020: (2, 1, 50.0),
            2021: (1, 1, 100.0),
            2022: (1, 1, 100.0),
        }


class TestLandingTypes:
    def test_missing_type_counts_as_ocean(self):
        events = _events(make_raw_launch([make_raw_launch_core(landing_type=None)]))
        assert landing_type_distribution(events) == {"ASDS": 0, "RTLS": 0, "Ocean": 1}
        assert events[0].landing_type is None

    def test_empty_events_all_zero(self):
        assert landing_type_distribution([]) == {"ASDS": 0, "RTLS": 0, "Ocean": 0}
        assert all(b.success_rate == 0.0 for b in landing_type_breakdown([]))

    def test_breakdown_order_and_descriptions(self):
        breakdown = landing_type_breakdown([])
        assert [b.landing_type for b in breakdown] == ["ASDS", "RTLS", "Ocean"]
        assert breakdown[0].description == "Autonomous Spaceport Drone Ship"

    def test_fixture_distribution(self, fixture_report):
        assert fixture_report.landing_type_counts == {"ASDS": 7, "RTLS": 4, "Ocean": 1}
        assert sum(fixture_report.landing_type_counts.values()) == len(fixture_report.recoveries)

    def test_fixture_breakdown(self, fixture_report):
        by_type = {b.landing_type: b for b in fixture_report.landing_types}
        assert (by_type["RTLS"].attempts, by_type["RTLS"].successes) == (4, 4)
        assert by_type["ASDS"].successes == 4
        assert by_type["Ocean"].success_rate == 0.0
