"""
Core (booster) model.

A core is the reusable first stage. The SpaceX API splits landing counters by
landing mode (RTLS / ASDS); the combined totals are exposed as computed
fields so they appear in JSON dumps alongside the raw counters.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, computed_field, field_validator, model_validator

from recovery_tracker.models.base import RECORD_CONFIG, non_negative

VALID_CORE_STATUSES = frozenset({"active", "retired", "lost", "unknown"})


class Core(BaseModel):
    """A single booster as tracked by the fleet aggregator.

    Attributes:
        id: Opaque upstream identifier.
        serial: Human-readable designator, e.g. ``"B1051"``.
        status: One of ``VALID_CORE_STATUSES``.
        reuse_count: Flights after the first one.
        rtls_attempts: Return-to-launch-site landing attempts.
        rtls_landings: Successful RTLS landings.
        asds_attempts: Drone-ship landing attempts.
        asds_landings: Successful drone-ship landings.
        last_update: Free-text status note from upstream.
    """

    model_config = RECORD_CONFIG

    id: str
    serial: Optional[str] = None
    status: str = "unknown"
    reuse_count: int = 0
    rtls_attempts: int = 0
    rtls_landings: int = 0
    asds_attempts: int = 0
    asds_landings: int = 0
    last_update: Optional[str] = None

    @field_validator("status")
    @classmethod
    def validate_status(cls, v: str) -> str:
        if v not in VALID_CORE_STATUSES:
            raise ValueError(
                f"Invalid core status '{v}'. Must be one of {sorted(VALID_CORE_STATUSES)}."
            )
        return v

    @field_validator(
        "reuse_count", "rtls_attempts", "rtls_landings", "asds_attempts", "asds_landings"
    )
    @classmethod
    def validate_counts(cls, v: int, info) -> int:
        return non_negative(v, info.field_name)

    @model_validator(mode="after")
    def validate_landings_within_attempts(self) -> "Core":
        if self.landing_successes > self.landing_attempts:
            raise ValueError(
                f"landing successes ({self.landing_successes}) exceed "
                f"landing attempts ({self.landing_attempts})."
            )
        return self

    @computed_field(alias="totalFlights")
    @property
    def total_flights(self) -> int:
        return self.reuse_count + 1

    @computed_field(alias="landingAttempts")
    @property
    def landing_attempts(self) -> int:
        return self.rtls_attempts + self.asds_attempts

    @computed_field(alias="landingSuccesses")
    @property
    def landing_successes(self) -> int:
        return self.rtls_landings + self.asds_landings
