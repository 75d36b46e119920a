"""
recovery_tracker.reporting — terminal formatting and flat-file export.

Nothing here computes statistics; every function receives analytics models.

Modules:
  formatters — ASCII terminal tables for Typer CLI commands.
  export     — JSON report export and flat CSV of recovery attempts.
"""
