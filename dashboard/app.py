"""
Booster Recovery Tracker — Streamlit Dashboard
==============================================

Web view of the same analytics the ``recovery-tracker`` CLI prints.

App structure (4 tabs)
----------------------
  1. Overview    — fleet metrics: cores, active cores, success rate, max reuse.
  2. Landpads    — per-site attempts, successes and success rate.
  3. Cores       — top reused (or still active) boosters.
  4. Recoveries  — recent attempts, yearly success trend, landing-type split.

Usage
-----
    pip install -e ".[dashboard]"
    streamlit run dashboard/app.py

Set ``RECOVERY_TRACKER_USE_FIXTURE=1`` (or tick "Fixture data" in the
sidebar) to run without network access.
"""

from __future__ import annotations

import sys
from pathlib import Path

# ── Ensure project root is importable ────────────────────────────────────────
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import streamlit as st

# ── Must be the first Streamlit call ─────────────────────────────────────────
st.set_page_config(
    page_title="Booster Recovery Tracker",
    layout="wide",
    initial_sidebar_state="expanded",
)

import httpx

from dashboard.data_loader import (
    cores_frame,
    landing_type_frame,
    landpads_frame,
    load_raw_collections,
    load_report,
    recoveries_frame,
    yearly_frame,
)
from recovery_tracker.analysis.fleet import dashboard_cores
from recovery_tracker.analysis.ranking import last_n
from recovery_tracker.config import load_config
from recovery_tracker.exceptions import RecoveryDataError

config = load_config()


# ── Sidebar ───────────────────────────────────────────────────────────────────

with st.sidebar:
    st.title("Booster Recovery Tracker")
    st.caption(f"Source: {config.api.base_url}")
    st.divider()

    use_fixture = st.checkbox(
        "Fixture data",
        value=config.api.use_fixture,
        help="Use the built-in sample payloads instead of the live API.",
    )

    if st.button("Clear cache", help="Force a fresh fetch from the API."):
        st.cache_data.clear()
        st.rerun()


# ── Data ──────────────────────────────────────────────────────────────────────

try:
    raw = load_raw_collections(config.api.base_url, config.api.timeout_seconds, use_fixture)
    report = load_report(raw, config.report)
except httpx.HTTPError as exc:
    st.error(f"Failed to fetch data from {config.api.base_url}: {exc}")
    st.stop()
except RecoveryDataError as exc:
    st.error(f"Upstream data could not be analyzed: {exc}")
    st.stop()

fetched_label = "fixture data" if raw["is_fixture"] else f"fetched {raw['fetched_at']:%Y-%m-%d %H:%M} UTC"
st.caption(f"Snapshot: {fetched_label}")

tab_overview, tab_pads, tab_cores, tab_recoveries = st.tabs(
    ["Overview", "Landpads", "Cores", "Recoveries"]
)


# ══════════════════════════════════════════════════════════════════════════════
# Tab 1 — Overview
# ══════════════════════════════════════════════════════════════════════════════

with tab_overview:
    fleet = report.fleet
    st.header("Fleet Overview")

    c1, c2, c3, c4 = st.columns(4)
    c1.metric("Cores", fleet.total)
    c2.metric("Active cores", fleet.active)
    c3.metric("Landing success", f"{fleet.landing_success_rate:.2f}%")
    c4.metric("Max reuse", f"{fleet.max_reuse}x")

    c5, c6, c7, c8 = st.columns(4)
    c5.metric("Total flights", fleet.total_flights)
    c6.metric("Landing attempts", fleet.total_landing_attempts)
    c7.metric("Retired", fleet.retired)
    c8.metric("Lost", fleet.lost)

    if fleet.most_reused_core is not None:
        champ = fleet.most_reused_core
        st.success(
            f"Reuse champion: **{champ.serial or champ.id}** "
            f"({champ.reuse_count} reuses, {champ.total_flights} flights)"
        )


# ══════════════════════════════════════════════════════════════════════════════
# Tab 2 — Landpads
# ══════════════════════════════════════════════════════════════════════════════

with tab_pads:
    st.header("Landing Sites")
    if not report.landpads:
        st.info("No landpads returned by the API.")
    else:
        st.dataframe(landpads_frame(report.landpads), use_container_width=True, hide_index=True)


# ══════════════════════════════════════════════════════════════════════════════
# Tab 3 — Cores
# ══════════════════════════════════════════════════════════════════════════════

with tab_cores:
    top_n = config.report.dashboard_top_cores_n
    st.header(f"Most Reused Cores (top {top_n})")
    leaders = dashboard_cores(report.cores, top_n)
    if not leaders:
        st.info("No reused or active cores.")
    else:
        st.dataframe(cores_frame(leaders), use_container_width=True, hide_index=True)

    st.subheader("Reuse distribution")
    if report.reuse_distribution:
        st.bar_chart(
            {f"{level}x": count for level, count in report.reuse_distribution.items()}
        )
    st.caption(f"Average reuse: {report.average_reuse:.2f} per core")


# ══════════════════════════════════════════════════════════════════════════════
# Tab 4 — Recoveries
# ══════════════════════════════════════════════════════════════════════════════

with tab_recoveries:
    recent_n = config.report.dashboard_recent_n
    st.header(f"Recent Recovery Attempts (last {recent_n})")
    recent = last_n(report.recoveries, recent_n)
    if not recent:
        st.info("No recovery attempts in the launch history.")
    else:
        st.dataframe(recoveries_frame(recent), use_container_width=True, hide_index=True)

    col_year, col_type = st.columns(2)
    with col_year:
        st.subheader("Yearly success rate")
        df_year = yearly_frame(report.yearly_trend)
        if df_year.empty:
            st.info("No data.")
        else:
            st.bar_chart(df_year[["Rate (%)"]])
            st.dataframe(df_year, use_container_width=True)

    with col_type:
        st.subheader("Landing types")
        df_type = landing_type_frame(report.landing_types)
        st.bar_chart(df_type[["Attempts"]])
        st.dataframe(df_type, use_container_width=True)

    st.caption(
        f"Failures: {report.failures.failures} / {report.failures.attempts} "
        f"attempts ({report.failures.failure_rate:.2f}%)"
    )
