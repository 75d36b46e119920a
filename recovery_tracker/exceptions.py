"""
Typed errors raised by the recovery analytics core.

Empty collections are *not* errors — they produce zero-valued aggregates.
Upstream fetch failures (``httpx.HTTPError``) are never wrapped here; they
propagate from the client untouched.
"""

from __future__ import annotations

from typing import Optional


class RecoveryDataError(ValueError):
    """Base class for input-shape problems detected by the analytics core."""


class MalformedRecordError(RecoveryDataError):
    """Raised when a raw record is missing a required field or fails validation.

    Attributes:
        kind:      Entity kind (``"core"``, ``"landpad"``, ``"launch"``).
        field:     Offending field name, or ``None`` if not attributable.
        record_id: Identifier of the record when one is available.
    """

    def __init__(
        self,
        kind: str,
        field: Optional[str],
        detail: str,
        record_id: Optional[str] = None,
    ) -> None:
        self.kind = kind
        self.field = field
        self.record_id = record_id
        where = f" '{record_id}'" if record_id else ""
        super().__init__(f"Malformed {kind} record{where}: {detail}")


class MissingCollectionError(RecoveryDataError):
    """Raised when a required input collection is absent or not a list.

    Attributes:
        kind: Entity kind of the missing collection.
    """

    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__(
            f"Expected a list of raw {kind} records, got nothing usable. "
            "Check the data-fetch step."
        )
