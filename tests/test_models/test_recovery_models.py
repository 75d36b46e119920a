"""Tests for the core, landpad and launch domain models."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from recovery_tracker.models.core import Core
from recovery_tracker.models.landpad import Landpad, LandpadStats
from recovery_tracker.models.launch import Launch, LaunchCore, RecoveryAttemptEvent


class TestCore:
    def test_derived_counts(self):
        core = Core(
            id="c1", reuse_count=4,
            rtls_attempts=2, rtls_landings=2, asds_attempts=3, asds_landings=1,
        )
        assert core.total_flights == 5
        assert core.landing_attempts == 5
        assert core.landing_successes == 3

    def test_defaults(self):
        core = Core(id="c1")
        assert core.status == "unknown"
        assert core.total_flights == 1
        assert core.landing_attempts == 0
        assert core.serial is None
        assert core.last_update is None

    def test_invalid_status_raises(self):
        with pytest.raises(ValidationError, match="status"):
            Core(id="c1", status="flying")

    def test_negative_count_raises(self):
        with pytest.raises(ValidationError, match="reuse_count"):
            Core(id="c1", reuse_count=-1)

    def test_successes_above_attempts_raises(self):
        with pytest.raises(ValidationError, match="exceed"):
            Core(id="c1", asds_attempts=1, asds_landings=2)

    def test_frozen(self):
        core = Core(id="c1")
        with pytest.raises(ValidationError):
            core.reuse_count = 3

    def test_json_dump_uses_camel_case_and_includes_derived(self):
        dumped = Core(id="c1", serial="B1051", reuse_count=2).model_dump(
            mode="json", by_alias=True
        )
        assert dumped["reuseCount"] == 2
        assert dumped["totalFlights"] == 3
        assert dumped["landingAttempts"] == 0
        assert dumped["landingSuccesses"] == 0
        assert "reuse_count" not in dumped


class TestLandpad:
    def test_invalid_type_raises(self):
        with pytest.raises(ValidationError, match="type"):
            Landpad(id="p1", type="HELIPAD")

    def test_successes_above_attempts_raises(self):
        with pytest.raises(ValidationError):
            Landpad(id="p1", landing_attempts=1, landing_successes=2)

    def test_free_text_status_allowed(self):
        pad = Landpad(id="p1", status="under construction")
        assert pad.status == "under construction"

    def test_stats_dump_includes_success_rate(self):
        stats = LandpadStats(id="p1", full_name="Landing Zone 1", success_rate=93.33)
        dumped = stats.model_dump(mode="json", by_alias=True)
        assert dumped["successRate"] == 93.33
        assert dumped["fullName"] == "Landing Zone 1"


class TestLaunch:
    def test_naive_date_assumed_utc(self):
        launch = Launch(name="L", date_utc=datetime(2020, 1, 1, 12, 0))
        assert launch.date_utc.tzinfo == timezone.utc

    def test_offset_date_converted_to_utc(self):
        # 23:30 on Dec 31 at UTC-5 is already the next year in UTC.
        tz = timezone(timedelta(hours=-5))
        launch = Launch(name="L", date_utc=datetime(2019, 12, 31, 23, 30, tzinfo=tz))
        assert launch.date_utc.year == 2020

    def test_cores_default_empty(self):
        assert Launch(name="L", date_utc="2020-01-01T00:00:00Z").cores == ()

    def test_invalid_landing_type_raises(self):
        with pytest.raises(ValidationError, match="landing type"):
            LaunchCore(landing_attempt=True, landing_type="Pad")


class TestRecoveryAttemptEvent:
    def _event(self, **kw) -> RecoveryAttemptEvent:
        fields = {"launch_name": "L", "launch_date": datetime(2020, 1, 1, tzinfo=timezone.utc)}
        fields.update(kw)
        return RecoveryAttemptEvent(**fields)

    def test_landing_attempt_always_true(self):
        assert self._event().landing_attempt is True
        with pytest.raises(ValidationError):
            self._event(landing_attempt=False)

    def test_absent_type_buckets_as_ocean(self):
        ev = self._event(landing_type=None)
        assert ev.landing_type is None
        assert ev.landing_bucket == "Ocean"

    def test_succeeded_only_for_true(self):
        assert self._event(landing_success=True).succeeded
        assert not self._event(landing_success=False).succeeded
        assert not self._event(landing_success=None).succeeded
