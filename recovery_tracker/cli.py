"""
Booster Recovery Tracker — CLI entry point.

All commands follow this pattern:
  1. Load ``AppConfig`` via ``load_config()``.
  2. Configure logging.
  3. Fetch cores / landpads / past launches (or fixtures with ``--fixture``).
  4. Normalize and analyze.
  5. Report result to stdout.

Install and run::

    pip install -e .
    recovery-tracker --help
    recovery-tracker overview
    recovery-tracker dashboard
    recovery-tracker analyze
    recovery-tracker export --out data/outputs/recovery_report.json
    recovery-tracker validate-config
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

app = typer.Typer(
    name="recovery-tracker",
    help="Booster recovery analytics for SpaceX cores, landpads and launches.",
    add_completion=False,
)

_CONFIG_HELP = "Path to TOML config file (default: config/default.toml)."
_FIXTURE_HELP = "Use built-in fixture data instead of calling the SpaceX API."


# ── Helpers ───────────────────────────────────────────────────────────────────

def _load_config_or_exit(config_path: Optional[str] = None):
    """Load AppConfig, printing a friendly error and exiting on failure."""
    from recovery_tracker.config import load_config

    try:
        cfg_path = Path(config_path) if config_path else None
        return load_config(cfg_path)
    except FileNotFoundError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)
    except Exception as exc:
        typer.echo(f"[ERROR] Config validation failed: {exc}", err=True)
        raise typer.Exit(code=1)


def _configure_logging(config):
    """Set up logging from config."""
    from recovery_tracker.utils.logging import configure_logging
    configure_logging(config.logging)


def _build_report_or_exit(config, fixture: bool):
    """Fetch the three collections and build the full report.

    Returns:
        ``(report, source_label)``.
    """
    import httpx

    from recovery_tracker.analysis.report import build_recovery_report
    from recovery_tracker.exceptions import RecoveryDataError
    from recovery_tracker.ingestion.spacex_client import SpaceXClient

    use_fixture = fixture or config.api.use_fixture

    try:
        with SpaceXClient(
            base_url=config.api.base_url,
            timeout=config.api.timeout_seconds,
        ) as client:
            collections = client.fetch_all(use_fixture=use_fixture)
    except httpx.HTTPError as exc:
        typer.echo(f"[ERROR] Failed to fetch data from {config.api.base_url}: {exc}", err=True)
        typer.echo("        Check the network connection, or rerun with --fixture.", err=True)
        raise typer.Exit(code=1)

    try:
        report = build_recovery_report(
            collections.cores,
            collections.landpads,
            collections.launches,
            report_config=config.report,
        )
    except RecoveryDataError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)

    source = "fixture" if collections.is_fixture else config.api.base_url
    return report, source


def _footer(source: str) -> None:
    typer.echo("")
    typer.echo(f"  Data source: {source}")


# ── Commands ──────────────────────────────────────────────────────────────────

@app.command("overview")
def overview(
    fixture: bool = typer.Option(False, "--fixture", help=_FIXTURE_HELP),
    config_path: Optional[str] = typer.Option(None, "--config", help=_CONFIG_HELP),
) -> None:
    """Print the quick fleet summary: cores, success rate, reuse champion."""
    from recovery_tracker.reporting.formatters import format_quick_overview

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    report, _ = _build_report_or_exit(config, fixture)
    typer.echo(format_quick_overview(report.fleet))


@app.command("dashboard")
def dashboard(
    recent: Optional[int] = typer.Option(
        None,
        "--recent",
        min=1,
        help="Number of recent recovery attempts to list. Uses config default if omitted.",
    ),
    fixture: bool = typer.Option(False, "--fixture", help=_FIXTURE_HELP),
    config_path: Optional[str] = typer.Option(None, "--config", help=_CONFIG_HELP),
) -> None:
    """Print the terminal dashboard.

    \b
    Sections:
      1. Fleet overview   — core counts, landing totals, reuse record.
      2. Landpads         — attempts / successes / rate per landing site.
      3. Active cores     — ranked by reuse count.
      4. Recent attempts  — newest recovery attempts first.
    """
    from recovery_tracker.analysis.ranking import last_n
    from recovery_tracker.reporting.formatters import (
        format_active_cores_table,
        format_fleet_overview,
        format_landpad_table,
        format_recent_recoveries,
    )

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    report, source = _build_report_or_exit(config, fixture)
    recent_events = (
        last_n(report.recoveries, recent) if recent else report.recent_recoveries
    )

    typer.echo(format_fleet_overview(report.fleet))
    typer.echo(format_landpad_table(report.landpads))
    typer.echo(format_active_cores_table(report.active_cores))
    typer.echo(format_recent_recoveries(recent_events))
    _footer(source)


@app.command("analyze")
def analyze(
    fixture: bool = typer.Option(False, "--fixture", help=_FIXTURE_HELP),
    config_path: Optional[str] = typer.Option(None, "--config", help=_CONFIG_HELP),
) -> None:
    """Print the in-depth recovery analysis.

    \b
    Sections:
      1. Yearly trend     — attempts, successes and rate per year.
      2. Landing types    — ASDS / RTLS / Ocean breakdown.
      3. Core reuse       — reuse histogram and leaderboard.
      4. Failures         — most recent failed landings and failure rate.
    """
    from recovery_tracker.reporting.formatters import (
        format_failures,
        format_landing_types,
        format_reuse_distribution,
        format_yearly_trend,
    )

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    report, source = _build_report_or_exit(config, fixture)

    typer.echo(format_yearly_trend(report.yearly_trend))
    typer.echo(format_landing_types(report.landing_types))
    typer.echo(
        format_reuse_distribution(
            report.reuse_distribution, report.top_reused, report.average_reuse
        )
    )
    typer.echo(format_failures(report.recent_failures, report.failures))
    _footer(source)


@app.command("export")
def export(
    out: str = typer.Option(
        "data/outputs/recovery_report.json",
        "--out",
        "-o",
        help="Destination file. A .csv suffix writes the flat recovery-attempt table.",
    ),
    fixture: bool = typer.Option(False, "--fixture", help=_FIXTURE_HELP),
    config_path: Optional[str] = typer.Option(None, "--config", help=_CONFIG_HELP),
) -> None:
    """Write the full recovery report to JSON (or recovery attempts to CSV)."""
    from recovery_tracker.reporting.export import (
        RECOVERY_CSV_FIELDS,
        export_to_csv,
        export_to_json,
        flatten_recoveries_for_export,
        report_to_dict,
    )

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    report, source = _build_report_or_exit(config, fixture)
    out_path = Path(out)

    if out_path.suffix.lower() == ".csv":
        rows = flatten_recoveries_for_export(report.recoveries)
        written = export_to_csv(rows, out_path, fieldnames=RECOVERY_CSV_FIELDS)
        typer.echo(f"  Wrote {len(rows)} recovery attempt(s) to {written}")
    else:
        written = export_to_json(report_to_dict(report, source=source), out_path)
        typer.echo(f"  Wrote recovery report to {written}")

    typer.echo("[OK] Export complete.")


@app.command("validate-config")
def validate_config(
    config_path: Optional[str] = typer.Option(None, "--config", help=_CONFIG_HELP),
    show_full: bool = typer.Option(
        False,
        "--full",
        help="Print full config including all fields.",
    ),
) -> None:
    """Validate the configuration file and print parsed values.

    Exits with code 1 if the config fails validation.
    """
    config = _load_config_or_exit(config_path)

    typer.echo("Configuration validated successfully.")
    typer.echo("")
    typer.echo(f"  API base URL:     {config.api.base_url}")
    typer.echo(f"  API timeout:      {config.api.timeout_seconds}s")
    typer.echo(f"  Fixture mode:     {config.api.use_fixture}")
    typer.echo(f"  Top reused rows:  {config.report.top_reused_n}")
    typer.echo(f"  Recent rows:      {config.report.recent_recoveries_n}")
    typer.echo(f"  Log level:        {config.logging.level}")
    typer.echo(f"  Debug mode:       {config.debug}")

    if show_full:
        typer.echo("")
        typer.echo("Full config (JSON):")
        typer.echo(json.dumps(config.model_dump(), indent=2, default=str))

    typer.echo("")
    typer.echo("[OK] Config valid.")


# ── Entry point ───────────────────────────────────────────────────────────────

if __name__ == "__main__":
    app()
