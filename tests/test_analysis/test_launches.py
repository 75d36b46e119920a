"""
Tests for recovery_tracker/analysis/launches.py.

What we test
------------
- One event per core sub-record with ``landing_attempt=True``.
- Launch order, then core order within a launch, is preserved.
- Launches without cores contribute nothing.
- Unknown outcomes count as failures; failure rate is 0.0 with no attempts.
"""

from __future__ import annotations

from conftest import make_raw_launch, make_raw_launch_core
from recovery_tracker.analysis.launches import (
    extract_recovery_attempts,
    failure_summary,
    recovery_failures,
)
from recovery_tracker.ingestion.normalize import normalize_launches


def _events(*raw_launches):
    return extract_recovery_attempts(normalize_launches(list(raw_launches)))


class TestExtractRecoveryAttempts:
    def test_only_attempted_core_becomes_event(self):
        events = _events(
            make_raw_launch(
                [
                    make_raw_launch_core(core="a", landing_attempt=False, landing_type=None),
                    make_raw_launch_core(core="b", landing_type="RTLS"),
                ],
                name="Two Cores",
            )
        )
        assert len(events) == 1
        assert events[0].core_id == "b"
        assert events[0].landing_type == "RTLS"
        assert events[0].launch_name == "Two Cores"

    def test_launch_without_cores(self):
        assert _events(make_raw_launch([])) == []
        assert _events(make_raw_launch(cores=None)) == []

    def test_no_launches(self):
        assert extract_recovery_attempts([]) == []

    def test_source_order_preserved(self):
        events = _events(
            make_raw_launch([make_raw_launch_core(core="a1"), make_raw_launch_core(core="a2")], name="A"),
            make_raw_launch([make_raw_launch_core(core="b1")], name="B"),
        )
        assert [e.core_id for e in events] == ["a1", "a2", "b1"]

    def test_event_carries_launch_date(self):
        (event,) = _events(make_raw_launch(date_utc="2018-02-06T20:45:00.000Z"))
        assert event.launch_date.year == 2018
        assert event.landing_attempt is True

    def test_fixture_event_count(self, fixture_report):
        assert len(fixture_report.recoveries) == 12
        assert fixture_report.recoveries[-1].launch_name == "Transporter-3"


class TestFailures:
    def test_null_outcome_counts_as_failure(self):
        events = _events(
            make_raw_launch([make_raw_launch_core(landing_success=None)]),
            make_raw_launch([make_raw_launch_core(landing_success=True)]),
        )
        assert len(recovery_failures(events)) == 1

    def test_summary_no_attempts(self):
        summary = failure_summary([])
        assert (summary.failures, summary.attempts, summary.failure_rate) == (0, 0, 0.0)

    def test_fixture_failures(self, fixture_report):
        summary = fixture_report.failures
        assert summary.failures == 4
        assert summary.attempts == 12
        assert summary.failure_rate == 33.33
        assert [e.launch_name for e in fixture_report.recent_failures] == [
            "CRS-5",
            "SES-9",
            "Falcon Heavy Test Flight",
            "Starlink-5 (v1.0)",
        ]
