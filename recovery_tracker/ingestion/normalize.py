"""
Record normalizer — raw SpaceX API dicts → frozen domain models.

Conventions applied here and nowhere else:
  - Missing or ``null`` landing/reuse counters coalesce to ``0``
    (``coalesce_count``). Aggregators never re-check for ``None`` counts.
  - Non-numeric optional fields (serial, locality, landing type, ...) stay
    ``None``; they are never replaced by ``""`` or ``0``.
  - Upstream snake_case keys are renamed to the model attribute names
    (``core`` → ``core_id``, ``flight`` → ``flight_number``, ...).

Failure modes:
  - ``MalformedRecordError`` — a required field is absent (``id`` for cores
    and landpads, ``name`` / ``date_utc`` for launches) or the record fails
    model validation (negative count, successes > attempts, bad date,
    non-string core status, ...).
  - ``MissingCollectionError`` — a whole collection is ``None`` / not a list.

A malformed record aborts the entire collection: no partial lists are returned.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Optional, TypeVar

from pydantic import BaseModel, ValidationError

from recovery_tracker.exceptions import MalformedRecordError, MissingCollectionError
from recovery_tracker.models.core import VALID_CORE_STATUSES, Core
from recovery_tracker.models.landpad import Landpad
from recovery_tracker.models.launch import Launch, LaunchCore

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


# ── Helpers ───────────────────────────────────────────────────────────────────


def coalesce_count(raw: Mapping[str, Any], key: str) -> Any:
    """Return ``raw[key]``, or ``0`` when the key is absent or ``null``."""
    value = raw.get(key)
    return 0 if value is None else value


def _require_mapping(raw: Any, kind: str) -> Mapping[str, Any]:
    if not isinstance(raw, Mapping):
        raise MalformedRecordError(
            kind, None, f"expected a JSON object, got {type(raw).__name__}"
        )
    return raw


def _require_field(raw: Mapping[str, Any], key: str, kind: str, record_id: Optional[str] = None) -> Any:
    value = raw.get(key)
    if value is None:
        raise MalformedRecordError(
            kind, key, f"missing required field '{key}'", record_id=record_id
        )
    return value


def _build(model: type[ModelT], kind: str, record_id: Optional[str], **fields: Any) -> ModelT:
    """Construct ``model``, translating validation failures to ``MalformedRecordError``."""
    try:
        return model(**fields)
    except ValidationError as exc:
        first = exc.errors()[0]
        loc = ".".join(str(part) for part in first.get("loc", ())) or None
        raise MalformedRecordError(kind, loc, first.get("msg", str(exc)), record_id=record_id) from exc


def _normalize_status(status: Any, core_id: str) -> str:
    if status is not None and not isinstance(status, str):
        raise MalformedRecordError(
            "core", "status", f"expected a string, got {type(status).__name__}", record_id=core_id
        )
    if status in VALID_CORE_STATUSES:
        return status
    logger.debug("Core %s: status %r mapped to 'unknown'", core_id, status)
    return "unknown"


# ── Single records ────────────────────────────────────────────────────────────


def normalize_core(raw: Any) -> Core:
    """Map one raw ``/cores`` record to a ``Core``.

    Raises:
        MalformedRecordError: If ``id`` is missing or validation fails.
    """
    raw = _require_mapping(raw, "core")
    core_id = str(_require_field(raw, "id", "core", record_id=raw.get("serial")))

    return _build(
        Core,
        "core",
        core_id,
        id=core_id,
        serial=raw.get("serial"),
        status=_normalize_status(raw.get("status"), core_id),
        reuse_count=coalesce_count(raw, "reuse_count"),
        rtls_attempts=coalesce_count(raw, "rtls_attempts"),
        rtls_landings=coalesce_count(raw, "rtls_landings"),
        asds_attempts=coalesce_count(raw, "asds_attempts"),
        asds_landings=coalesce_count(raw, "asds_landings"),
        last_update=raw.get("last_update"),
    )


def normalize_landpad(raw: Any) -> Landpad:
    """Map one raw ``/landpads`` record to a ``Landpad``.

    Raises:
        MalformedRecordError: If ``id`` is missing or validation fails.
    """
    raw = _require_mapping(raw, "landpad")
    pad_id = str(_require_field(raw, "id", "landpad", record_id=raw.get("name")))

    return _build(
        Landpad,
        "landpad",
        pad_id,
        id=pad_id,
        name=raw.get("name"),
        full_name=raw.get("full_name"),
        type=raw.get("type"),
        locality=raw.get("locality"),
        region=raw.get("region"),
        landing_attempts=coalesce_count(raw, "landing_attempts"),
        landing_successes=coalesce_count(raw, "landing_successes"),
        status=raw.get("status"),
    )


def _normalize_launch_core(raw: Any, launch_name: str) -> LaunchCore:
    raw = _require_mapping(raw, "launch")
    return _build(
        LaunchCore,
        "launch",
        launch_name,
        core_id=raw.get("core"),
        flight_number=raw.get("flight"),
        gridfins=raw.get("gridfins"),
        legs=raw.get("legs"),
        reused=raw.get("reused"),
        landing_attempt=False if raw.get("landing_attempt") is None else raw["landing_attempt"],
        landing_success=raw.get("landing_success"),
        landing_type=raw.get("landing_type"),
        landpad_id=raw.get("landpad"),
    )


def normalize_launch(raw: Any) -> Launch:
    """Map one raw ``/launches`` record to a ``Launch``.

    A missing or ``null`` ``cores`` field means the launch has no core
    sub-records; any other non-list value is malformed.

    Raises:
        MalformedRecordError: If ``name`` or ``date_utc`` is missing, or any
            core sub-record fails validation.
    """
    raw = _require_mapping(raw, "launch")
    name = str(_require_field(raw, "name", "launch", record_id=raw.get("id")))
    date_utc = _require_field(raw, "date_utc", "launch", record_id=name)

    raw_cores = raw.get("cores")
    if raw_cores is None:
        raw_cores = []
    elif not isinstance(raw_cores, list):
        raise MalformedRecordError(
            "launch", "cores", f"expected a list, got {type(raw_cores).__name__}", record_id=name
        )

    cores = tuple(_normalize_launch_core(c, name) for c in raw_cores)

    return _build(
        Launch,
        "launch",
        name,
        id=raw.get("id"),
        name=name,
        date_utc=date_utc,
        cores=cores,
    )


# ── Collections ───────────────────────────────────────────────────────────────


def _require_collection(raw: Any, kind: str) -> list[Any]:
    if not isinstance(raw, list):
        raise MissingCollectionError(kind)
    return raw


def normalize_cores(raw_cores: Any) -> list[Core]:
    """Normalize a full ``/cores`` response. Empty lists are valid."""
    cores = [normalize_core(r) for r in _require_collection(raw_cores, "core")]
    logger.debug("Normalized %d core records", len(cores))
    return cores


def normalize_landpads(raw_landpads: Any) -> list[Landpad]:
    """Normalize a full ``/landpads`` response. Empty lists are valid."""
    pads = [normalize_landpad(r) for r in _require_collection(raw_landpads, "landpad")]
    logger.debug("Normalized %d landpad records", len(pads))
    return pads


def normalize_launches(raw_launches: Any) -> list[Launch]:
    """Normalize a full ``/launches/past`` response, preserving order."""
    launches = [normalize_launch(r) for r in _require_collection(raw_launches, "launch")]
    logger.debug("Normalized %d launch records", len(launches))
    return launches
