"""
Recovery analytics — pure, synchronous reductions over normalized records.

No function in this package performs I/O, mutates its inputs, or keeps
state between calls. All of them accept the frozen models produced by
``recovery_tracker.ingestion.normalize``.

Modules:
  rates      — Division-guarded percentage helper.
  ranking    — Stable descending ranking and "last N" truncation.
  fleet      — Fleet statistics, reuse distribution, top-reused cores.
  landpads   — Per-landpad success rates.
  launches   — Launch → recovery-attempt event extraction, failure analysis.
  trends     — Yearly trend and landing-type breakdown.
  report     — Runs every view above over one snapshot.
"""
