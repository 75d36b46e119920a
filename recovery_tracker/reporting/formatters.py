"""
ASCII terminal formatters for CLI reporting commands.

All formatters accept analytics models and return plain multi-line strings
suitable for ``typer.echo()``. No colour or table library is used; output
stays readable when piped to a file.

Recency
-------
Recovery events arrive oldest-first. ``format_recent_recoveries`` and
``format_failures`` receive the already-truncated "last N" slice and reverse
it here, so the newest attempt is printed first.
"""

from __future__ import annotations

from collections.abc import Sequence

from recovery_tracker.models.core import Core
from recovery_tracker.models.landpad import LandpadStats
from recovery_tracker.models.launch import LANDING_TYPE_DESCRIPTIONS, RecoveryAttemptEvent
from recovery_tracker.models.stats import (
    FailureSummary,
    FleetStats,
    LandingTypeStats,
    YearlyTrend,
)

_BAR_WIDTH = 20


# ── Small helpers ─────────────────────────────────────────────────────────────


def _truncate(text: str | None, width: int) -> str:
    if not text:
        return "-"
    return text if len(text) <= width else text[: width - 1] + "~"


def _rate_bar(rate_pct: float, width: int = _BAR_WIDTH) -> str:
    """``#`` per 5 percentage points, padded with ``.`` to ``width``."""
    filled = min(width, int(rate_pct / (100 / width) + 0.5))
    return "#" * filled + "." * (width - filled)


def _yes_no(flag: bool | None) -> str:
    if flag is None:
        return "-"
    return "yes" if flag else "no"


def _section(title: str) -> list[str]:
    return ["", f"=== {title} ==="]


# ── Overviews ─────────────────────────────────────────────────────────────────


def format_quick_overview(fleet: FleetStats) -> str:
    """Five-line summary printed by ``recovery-tracker overview``."""
    lines = _section("Booster Recovery Quick Overview")
    lines.append(f"  Cores:            {fleet.total}")
    lines.append(f"  Active cores:     {fleet.active}")
    lines.append(f"  Landing success:  {fleet.landing_success_rate:.2f}%")
    lines.append(f"  Max reuse:        {fleet.max_reuse}")
    if fleet.most_reused_core is not None:
        lines.append(f"  Reuse champion:   {fleet.most_reused_core.serial or fleet.most_reused_core.id}")
    lines.append("")
    lines.append("  More: 'recovery-tracker dashboard' | 'recovery-tracker analyze'")
    return "\n".join(lines)


def format_fleet_overview(fleet: FleetStats) -> str:
    """Fleet counts, landing totals and the reuse record."""
    lines = _section("Fleet Overview")
    lines.append("  Cores")
    lines.append(f"    Total:          {fleet.total}")
    lines.append(f"    Active:         {fleet.active}")
    lines.append(f"    Retired:        {fleet.retired}")
    lines.append(f"    Lost:           {fleet.lost}")
    lines.append("  Recovery")
    lines.append(f"    Total flights:  {fleet.total_flights}")
    lines.append(f"    Landing tries:  {fleet.total_landing_attempts}")
    lines.append(f"    Landings:       {fleet.total_landing_successes}")
    lines.append(f"    Success rate:   {fleet.landing_success_rate:.2f}%")
    lines.append("  Reuse record")
    lines.append(f"    Max reuse:      {fleet.max_reuse}")
    if fleet.most_reused_core is not None:
        lines.append(f"    Champion:       {fleet.most_reused_core.serial or fleet.most_reused_core.id}")
    return "\n".join(lines)


# ── Tables ────────────────────────────────────────────────────────────────────


def format_landpad_table(landpads: Sequence[LandpadStats]) -> str:
    """One row per landpad with attempts, successes and success rate."""
    lines = _section("Landpads")
    if not landpads:
        lines.append("  (no landpads)")
        return "\n".join(lines)

    header = (
        f"  {'Name':<22}  {'Type':<4}  {'Locality':<28}  "
        f"{'Tries':>5}  {'OK':>5}  {'Rate':>7}  {'Status':<12}"
    )
    lines.append(header)
    lines.append("  " + "-" * (len(header) - 2))
    for pad in landpads:
        lines.append(
            f"  {_truncate(pad.name, 22):<22}  {pad.type or '-':<4}  "
            f"{_truncate(pad.locality, 28):<28}  {pad.landing_attempts:>5}  "
            f"{pad.landing_successes:>5}  {pad.success_rate:>6.2f}%  "
            f"{pad.status or '-':<12}"
        )
    return "\n".join(lines)


def format_active_cores_table(cores: Sequence[Core]) -> str:
    """Active cores (already ranked by reuse) with their flight counters."""
    lines = _section("Active Cores")
    if not cores:
        lines.append("  (no active cores)")
        return "\n".join(lines)

    header = f"  {'Serial':<8}  {'Flights':>7}  {'Reuses':>6}  {'Tries':>5}  {'Landed':>6}"
    lines.append(header)
    lines.append("  " + "-" * (len(header) - 2))
    for core in cores:
        lines.append(
            f"  {core.serial or core.id:<8}  {core.total_flights:>7}  "
            f"{core.reuse_count:>6}  {core.landing_attempts:>5}  {core.landing_successes:>6}"
        )
    lines.append("")
    lines.append(f"  {len(cores)} active core(s)")
    return "\n".join(lines)


def _event_rows(events: Sequence[RecoveryAttemptEvent], with_result: bool) -> list[str]:
    header = f"  {'Mission':<30}  {'Date':<10}  {'Type':<5}  {'Reused':<6}"
    if with_result:
        header += f"  {'Result':<6}"
    rows = [header, "  " + "-" * (len(header) - 2)]
    for ev in reversed(events):
        row = (
            f"  {_truncate(ev.launch_name, 30):<30}  {ev.launch_date:%Y-%m-%d}  "
            f"{ev.landing_type or '-':<5}  {_yes_no(ev.reused):<6}"
        )
        if with_result:
            row += f"  {'OK' if ev.succeeded else 'FAIL':<6}"
        rows.append(row)
    return rows


def format_recent_recoveries(recent: Sequence[RecoveryAttemptEvent]) -> str:
    """Most recent recovery attempts, newest first.

    Args:
        recent: Last-N slice of the chronological event list.
    """
    lines = _section("Recent Recovery Attempts")
    if not recent:
        lines.append("  (no recovery attempts)")
        return "\n".join(lines)
    lines.extend(_event_rows(recent, with_result=True))
    return "\n".join(lines)


# ── Trend analysis ────────────────────────────────────────────────────────────


def format_yearly_trend(trend: Sequence[YearlyTrend]) -> str:
    """Per-year landing success with a 20-character bar."""
    lines = _section("Yearly Recovery Success")
    if not trend:
        lines.append("  (no recovery attempts)")
        return "\n".join(lines)

    lines.append(f"  {'Year':<4}  {'Tries':>5}  {'OK':>4}  {'Rate':>6}  Trend")
    lines.append("  " + "-" * 48)
    for row in trend:
        lines.append(
            f"  {row.year:<4}  {row.attempts:>5}  {row.successes:>4}  "
            f"{row.success_rate:>5.1f}%  {_rate_bar(row.success_rate)}"
        )
    return "\n".join(lines)


def format_landing_types(breakdown: Sequence[LandingTypeStats]) -> str:
    """Landing-type table; buckets without attempts are not printed."""
    lines = _section("Landing Types")
    rows = [b for b in breakdown if b.attempts > 0]
    if not rows:
        lines.append("  (no recovery attempts)")
        return "\n".join(lines)

    lines.append(f"  {'Type':<5}  {'Description':<34}  {'Tries':>5}  {'OK':>4}  {'Rate':>6}")
    lines.append("  " + "-" * 62)
    for b in rows:
        lines.append(
            f"  {b.landing_type:<5}  {b.description:<34}  {b.attempts:>5}  "
            f"{b.successes:>4}  {b.success_rate:>5.1f}%"
        )
    lines.append("")
    lines.append(f"  ASDS: {LANDING_TYPE_DESCRIPTIONS['ASDS']}")
    lines.append(f"  RTLS: {LANDING_TYPE_DESCRIPTIONS['RTLS']}")
    return "\n".join(lines)


def format_reuse_distribution(
    distribution: dict[int, int],
    top_reused: Sequence[Core],
    avg_reuse: float,
) -> str:
    """Reuse histogram, the reuse leaderboard and the fleet average."""
    lines = _section("Core Reuse")
    if not distribution:
        lines.append("  (no cores)")
        return "\n".join(lines)

    lines.append("  Reuse distribution")
    for level, count in distribution.items():
        label = "Flown once" if level == 0 else f"Reused {level}x"
        lines.append(f"    {label:<12}  {'#' * count} {count}")

    lines.append("")
    lines.append(f"  Most reused (top {len(top_reused)})")
    for rank, core in enumerate(top_reused, start=1):
        lines.append(
            f"    {rank:>2}. {core.serial or core.id:<8}  reused {core.reuse_count}x "
            f"({core.total_flights} flights)"
        )

    lines.append("")
    lines.append(f"  Average reuse: {avg_reuse:.2f} per core")
    return "\n".join(lines)


def format_failures(
    recent_failures: Sequence[RecoveryAttemptEvent],
    summary: FailureSummary,
) -> str:
    """Most recent failed landings plus the overall failure rate."""
    lines = _section("Recovery Failures")
    if summary.failures == 0:
        lines.append("  No recovery failures recorded.")
        return "\n".join(lines)

    lines.extend(_event_rows(recent_failures, with_result=False))
    lines.append("")
    lines.append(f"  Failures: {summary.failures} / {summary.attempts} attempts")
    lines.append(f"  Failure rate: {summary.failure_rate:.2f}%")
    return "\n".join(lines)
