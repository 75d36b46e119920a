"""
Ranking helpers shared by the "top reused" and recent-events views.

``rank_by`` relies on ``sorted`` being stable even with ``reverse=True``:
items with equal keys keep their input order, so the first-seen item wins
a tie.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from typing import Optional, TypeVar

T = TypeVar("T")


def rank_by(
    items: Iterable[T],
    key: Callable[[T], float],
    n: Optional[int] = None,
) -> list[T]:
    """Sort ``items`` by ``key`` descending (stable) and keep the first ``n``.

    Args:
        items: Items to rank. Not modified.
        key:   Numeric sort key.
        n:     Maximum number of items returned; ``None`` keeps all.

    Raises:
        ValueError: If ``n`` is negative.
    """
    if n is not None and n < 0:
        raise ValueError(f"n must be non-negative, got {n}.")
    ranked = sorted(items, key=key, reverse=True)
    return ranked if n is None else ranked[:n]


def last_n(items: Sequence[T], n: int) -> list[T]:
    """Return the last ``n`` items in their original order.

    With a chronologically ascending input this is "the ``n`` most recent";
    reversing for display is left to the presentation layer.
    """
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}.")
    if n == 0:
        return []
    return list(items[-n:])
