"""
Export helpers for the full recovery report.

All writers create parent directories, write UTF-8, and return the written
``Path``. ``report_to_dict`` produces the camelCase JSON shape used by the
dashboard and by any external consumer of ``recovery-tracker export``.
"""

from __future__ import annotations

import csv
import json
from collections.abc import Sequence
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from recovery_tracker.models.launch import RecoveryAttemptEvent
from recovery_tracker.models.stats import RecoveryReport

RECOVERY_CSV_FIELDS = [
    "launch_name",
    "launch_date",
    "core_id",
    "flight_number",
    "reused",
    "gridfins",
    "legs",
    "landing_type",
    "landing_success",
    "landpad_id",
]


def export_to_csv(
    records: list[dict],
    path: Path,
    fieldnames: list[str] | None = None,
) -> Path:
    """Write ``records`` to a UTF-8 CSV file.

    Args:
        records:    List of row dicts.
        path:       Destination file path (parent dirs created if missing).
        fieldnames: Column order.  If None, uses the keys of the first record.

    Returns:
        ``path`` as written.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    if not records:
        path.write_text("", encoding="utf-8")
        return path
    cols = fieldnames or list(records[0].keys())
    with path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=cols, extrasaction="ignore")
        writer.writeheader()
        writer.writerows(records)
    return path


def export_to_json(data: dict | list, path: Path) -> Path:
    """Write ``data`` to a pretty-printed JSON file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2, default=str), encoding="utf-8")
    return path


def report_to_dict(
    report: RecoveryReport,
    source: str = "",
    generated_at: datetime | None = None,
) -> dict[str, Any]:
    """Serialise a ``RecoveryReport`` to plain JSON types with camelCase keys.

    A ``_meta`` block records where and when the snapshot was produced.
    """
    generated = generated_at or datetime.now(timezone.utc)
    payload = report.model_dump(mode="json", by_alias=True)
    payload["_meta"] = {
        "source": source,
        "generatedAt": generated.isoformat(timespec="seconds"),
    }
    return payload


def flatten_recoveries_for_export(events: Sequence[RecoveryAttemptEvent]) -> list[dict]:
    """One flat row per recovery attempt, ready for CSV / spreadsheet use.

    ``landing_type`` is left empty when upstream gave none; the Ocean
    default only applies to grouping, not to the exported record.
    """
    rows: list[dict] = []
    for ev in events:
        rows.append({
            "launch_name":     ev.launch_name,
            "launch_date":     ev.launch_date.isoformat(),
            "core_id":         ev.core_id or "",
            "flight_number":   "" if ev.flight_number is None else ev.flight_number,
            "reused":          "" if ev.reused is None else ev.reused,
            "gridfins":        "" if ev.gridfins is None else ev.gridfins,
            "legs":            "" if ev.legs is None else ev.legs,
            "landing_type":    ev.landing_type or "",
            "landing_success": "" if ev.landing_success is None else ev.landing_success,
            "landpad_id":      ev.landpad_id or "",
        })
    return rows
