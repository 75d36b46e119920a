"""Percentage helper shared by every aggregator."""

from __future__ import annotations


def percentage(numerator: int, denominator: int, digits: int = 2) -> float:
    """Return ``numerator / denominator * 100`` rounded to ``digits``.

    A zero denominator yields ``0.0`` instead of raising or producing NaN.
    """
    if denominator == 0:
        return 0.0
    return round(numerator / denominator * 100, digits)
