"""Shared pydantic configuration for all domain records."""

from __future__ import annotations

from pydantic import ConfigDict
from pydantic.alias_generators import to_camel

# Frozen: records pass through several aggregations and must never be mutated.
# camelCase aliases: JSON dumps keep the field names of the upstream report shape.
RECORD_CONFIG = ConfigDict(
    frozen=True,
    alias_generator=to_camel,
    populate_by_name=True,
)


def non_negative(v: int, name: str) -> int:
    if v < 0:
        raise ValueError(f"{name} must be non-negative, got {v}.")
    return v
