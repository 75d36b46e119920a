"""
Launch models and the flattened recovery-attempt event.

``Launch.cores`` keeps upstream order; the extractor relies on it as the
recency signal (source order is chronological ascending).
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Literal, Optional

from pydantic import BaseModel, field_validator

from recovery_tracker.models.base import RECORD_CONFIG

# Fixed grouping buckets, in report order.
LANDING_TYPES: tuple[str, ...] = ("ASDS", "RTLS", "Ocean")

LANDING_TYPE_DESCRIPTIONS: dict[str, str] = {
    "ASDS": "Autonomous Spaceport Drone Ship",
    "RTLS": "Return To Launch Site",
    "Ocean": "Ocean splashdown (not recovered)",
}

# Bucket used when a landing attempt carries no landing type.
DEFAULT_LANDING_TYPE = "Ocean"


def _validate_landing_type(v: Optional[str]) -> Optional[str]:
    if v is not None and v not in LANDING_TYPES:
        raise ValueError(f"Invalid landing type '{v}'. Must be one of {list(LANDING_TYPES)}.")
    return v


class LaunchCore(BaseModel):
    """One core's participation in a launch."""

    model_config = RECORD_CONFIG

    core_id: Optional[str] = None
    flight_number: Optional[int] = None
    gridfins: Optional[bool] = None
    legs: Optional[bool] = None
    reused: Optional[bool] = None
    landing_attempt: bool = False
    landing_success: Optional[bool] = None
    landing_type: Optional[str] = None
    landpad_id: Optional[str] = None

    @field_validator("landing_type")
    @classmethod
    def validate_landing_type(cls, v: Optional[str]) -> Optional[str]:
        return _validate_landing_type(v)


class Launch(BaseModel):
    """A past launch with its ordered core sub-records."""

    model_config = RECORD_CONFIG

    id: Optional[str] = None
    name: str
    date_utc: datetime
    cores: tuple[LaunchCore, ...] = ()

    @field_validator("date_utc")
    @classmethod
    def ensure_utc(cls, v: datetime) -> datetime:
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v.astimezone(timezone.utc)


class RecoveryAttemptEvent(BaseModel):
    """A single attempted booster landing, flattened from launch → core.

    ``landing_type`` keeps the upstream value (``None`` when absent); use
    ``landing_bucket`` for grouping.
    """

    model_config = RECORD_CONFIG

    launch_name: str
    launch_date: datetime
    core_id: Optional[str] = None
    flight_number: Optional[int] = None
    gridfins: Optional[bool] = None
    legs: Optional[bool] = None
    reused: Optional[bool] = None
    landing_attempt: Literal[True] = True
    landing_success: Optional[bool] = None
    landing_type: Optional[str] = None
    landpad_id: Optional[str] = None

    @field_validator("landing_type")
    @classmethod
    def validate_landing_type(cls, v: Optional[str]) -> Optional[str]:
        return _validate_landing_type(v)

    @property
    def landing_bucket(self) -> str:
        return self.landing_type or DEFAULT_LANDING_TYPE

    @property
    def succeeded(self) -> bool:
        return self.landing_success is True
