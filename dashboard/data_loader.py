"""
Dashboard data loader.

Raw collections are fetched through ``SpaceXClient`` and cached with
``@st.cache_data`` (5 minute TTL), so widget interactions do not re-hit the
API. The analytics report is rebuilt from the cached raw payloads on every
rerun; it is pure and cheap.

The ``*_frame`` helpers turn analytics models into display-ready pandas
DataFrames with human column names.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import pandas as pd
import streamlit as st

from recovery_tracker.analysis.report import build_recovery_report
from recovery_tracker.config import ReportConfig
from recovery_tracker.ingestion.spacex_client import SpaceXClient
from recovery_tracker.models.core import Core
from recovery_tracker.models.landpad import LandpadStats
from recovery_tracker.models.launch import RecoveryAttemptEvent
from recovery_tracker.models.stats import LandingTypeStats, RecoveryReport, YearlyTrend


# ── Loaders ──────────────────────────────────────────────────────────────────


@st.cache_data(ttl=300, show_spinner="Fetching SpaceX data ...")
def load_raw_collections(base_url: str, timeout: float, use_fixture: bool) -> dict[str, Any]:
    """Fetch cores, landpads and past launches (or fixtures).

    Raises ``httpx.HTTPError`` on fetch failure; failures are not cached.
    """
    with SpaceXClient(base_url=base_url, timeout=timeout) as client:
        collections = client.fetch_all(use_fixture=use_fixture)
    return {
        "cores": collections.cores,
        "landpads": collections.landpads,
        "launches": collections.launches,
        "is_fixture": collections.is_fixture,
        "fetched_at": collections.fetched_at,
    }


def load_report(raw: dict[str, Any], report_config: ReportConfig) -> RecoveryReport:
    return build_recovery_report(
        raw["cores"], raw["landpads"], raw["launches"], report_config=report_config
    )


# ── DataFrame builders ───────────────────────────────────────────────────────


def landpads_frame(landpads: Sequence[LandpadStats]) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {
                "Name":      pad.name,
                "Full name": pad.full_name,
                "Type":      pad.type,
                "Locality":  pad.locality or "-",
                "Attempts":  pad.landing_attempts,
                "Successes": pad.landing_successes,
                "Rate (%)":  pad.success_rate,
                "Status":    pad.status,
            }
            for pad in landpads
        ]
    )


def cores_frame(cores: Sequence[Core]) -> pd.DataFrame:
    """Leaderboard rows; ``Rank`` is 1-based in input order."""
    return pd.DataFrame(
        [
            {
                "Rank":      rank,
                "Serial":    core.serial or core.id,
                "Flights":   core.total_flights,
                "Reuses":    core.reuse_count,
                "Landings":  core.landing_successes,
                "Status":    core.status,
            }
            for rank, core in enumerate(cores, start=1)
        ]
    )


def recoveries_frame(events: Sequence[RecoveryAttemptEvent]) -> pd.DataFrame:
    """Recovery attempts, newest first."""
    return pd.DataFrame(
        [
            {
                "Mission":  ev.launch_name,
                "Date":     ev.launch_date.date(),
                "Landing":  ev.landing_type or "-",
                "Reused":   "yes" if ev.reused else "no",
                "Result":   "success" if ev.succeeded else "failure",
            }
            for ev in reversed(events)
        ]
    )


def yearly_frame(trend: Sequence[YearlyTrend]) -> pd.DataFrame:
    df = pd.DataFrame(
        [
            {
                "Year":      str(row.year),
                "Attempts":  row.attempts,
                "Successes": row.successes,
                "Rate (%)":  row.success_rate,
            }
            for row in trend
        ]
    )
    return df.set_index("Year") if not df.empty else df


def landing_type_frame(breakdown: Sequence[LandingTypeStats]) -> pd.DataFrame:
    df = pd.DataFrame(
        [
            {
                "Type":      b.landing_type,
                "Attempts":  b.attempts,
                "Successes": b.successes,
                "Rate (%)":  b.success_rate,
            }
            for b in breakdown
        ]
    )
    return df.set_index("Type")
