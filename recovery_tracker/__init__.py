"""
Booster Recovery Tracker — reusable-rocket recovery analytics.

Packages:
  models      — Frozen pydantic domain models (cores, landpads, launches, stats)
  ingestion   — SpaceX API client and raw-record normalization
  analysis    — Pure aggregations: fleet, landpads, launch recoveries, trends
  reporting   — Plain-text terminal formatters and JSON/CSV export
"""

__version__ = "0.1.0"
