"""Landpad models — the raw landing site and its success-rate enriched view."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, field_validator, model_validator

from recovery_tracker.models.base import RECORD_CONFIG, non_negative

VALID_LANDPAD_TYPES = frozenset({"RTLS", "ASDS"})


class Landpad(BaseModel):
    """A designated landing site: a land zone (RTLS) or a drone ship (ASDS).

    ``status`` is kept as upstream free text (``active``, ``retired``,
    ``under construction``, ...). Only the landing counters are validated.
    """

    model_config = RECORD_CONFIG

    id: str
    name: Optional[str] = None
    full_name: Optional[str] = None
    type: Optional[str] = None
    locality: Optional[str] = None
    region: Optional[str] = None
    landing_attempts: int = 0
    landing_successes: int = 0
    status: Optional[str] = None

    @field_validator("type")
    @classmethod
    def validate_type(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and v not in VALID_LANDPAD_TYPES:
            raise ValueError(
                f"Invalid landpad type '{v}'. Must be one of {sorted(VALID_LANDPAD_TYPES)}."
            )
        return v

    @field_validator("landing_attempts", "landing_successes")
    @classmethod
    def validate_counts(cls, v: int, info) -> int:
        return non_negative(v, info.field_name)

    @model_validator(mode="after")
    def validate_successes_within_attempts(self) -> "Landpad":
        if self.landing_successes > self.landing_attempts:
            raise ValueError(
                f"landing_successes ({self.landing_successes}) exceed "
                f"landing_attempts ({self.landing_attempts})."
            )
        return self


class LandpadStats(Landpad):
    """Landpad with its landing success rate (percent, 2 decimals)."""

    success_rate: float = 0.0
