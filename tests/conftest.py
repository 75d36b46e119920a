"""
Shared pytest fixtures for the Booster Recovery Tracker test suite.

Provides:
  - Raw record factories shaped like SpaceX v4 API responses
    (``make_raw_core``, ``make_raw_landpad``, ``make_raw_launch``,
    ``make_raw_launch_core``). Override any field via keyword arguments.
  - ``fixture_collections``: the client's built-in offline payloads.
  - ``fixture_report``: the full ``RecoveryReport`` built from them.
"""

from __future__ import annotations

from typing import Any

import pytest

from recovery_tracker.analysis.report import build_recovery_report
from recovery_tracker.ingestion.spacex_client import FetchedCollections, SpaceXClient
from recovery_tracker.models.stats import RecoveryReport

TEST_BASE_URL = "https://api.example.test/v4"


# ── Raw record factories ──────────────────────────────────────────────────────

def make_raw_core(**overrides: Any) -> dict[str, Any]:
    raw = {
        "id": "core-1",
        "serial": "B1001",
        "status": "active",
        "reuse_count": 0,
        "rtls_attempts": 0,
        "rtls_landings": 0,
        "asds_attempts": 0,
        "asds_landings": 0,
        "last_update": None,
    }
    raw.update(overrides)
    return raw


def make_raw_landpad(**overrides: Any) -> dict[str, Any]:
    raw = {
        "id": "pad-1",
        "name": "LZ-1",
        "full_name": "Landing Zone 1",
        "type": "RTLS",
        "locality": "Cape Canaveral",
        "region": "Florida",
        "landing_attempts": 0,
        "landing_successes": 0,
        "status": "active",
    }
    raw.update(overrides)
    return raw


def make_raw_launch_core(**overrides: Any) -> dict[str, Any]:
    raw = {
        "core": "core-1",
        "flight": 1,
        "gridfins": True,
        "legs": True,
        "reused": False,
        "landing_attempt": True,
        "landing_success": True,
        "landing_type": "ASDS",
        "landpad": "pad-1",
    }
    raw.update(overrides)
    return raw


_DEFAULT_CORES: Any = object()


def make_raw_launch(cores: Any = _DEFAULT_CORES, **overrides: Any) -> dict[str, Any]:
    """Raw launch; pass ``cores=None`` to send an explicit JSON ``null``."""
    raw = {
        "id": "launch-1",
        "name": "Test Mission",
        "date_utc": "2020-06-01T12:00:00.000Z",
        "cores": [make_raw_launch_core()] if cores is _DEFAULT_CORES else cores,
    }
    raw.update(overrides)
    return raw


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture
def fixture_collections() -> FetchedCollections:
    """The client's offline payloads (5 cores, 4 landpads, 12 launches)."""
    with SpaceXClient(base_url=TEST_BASE_URL) as client:
        return client.get_fixture_collections()


@pytest.fixture
def fixture_report(fixture_collections: FetchedCollections) -> RecoveryReport:
    """Full report over the fixture payloads with default row limits."""
    return build_recovery_report(
        fixture_collections.cores,
        fixture_collections.landpads,
        fixture_collections.launches,
    )
