"""Landpad statistics aggregator — a per-element map, order preserved."""

from __future__ import annotations

from collections.abc import Sequence

from recovery_tracker.analysis.rates import percentage
from recovery_tracker.models.landpad import Landpad, LandpadStats


def landpad_stats(pad: Landpad) -> LandpadStats:
    """Attach ``success_rate`` (percent, 2 decimals) to one landpad."""
    return LandpadStats(
        **pad.model_dump(),
        success_rate=percentage(pad.landing_successes, pad.landing_attempts, digits=2),
    )


def analyze_landpad_stats(landpads: Sequence[Landpad]) -> list[LandpadStats]:
    """Return every landpad enriched with its success rate, in input order.

    A pad with no attempts gets ``success_rate == 0.0``.
    """
    return [landpad_stats(pad) for pad in landpads]
