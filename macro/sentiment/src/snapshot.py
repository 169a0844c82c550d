"""Read the previous artifact and derive week-over-week "prev" values."""
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from .config import LONG_LABEL, NET_LABEL, SHORT_LABEL
from .decoders import decode_number
from .errors import SnapshotError
from .records import ParsedRecord

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class PriorValues:
    net: Optional[float] = None
    long: Optional[float] = None
    short: Optional[float] = None


def load_snapshot(path: Path) -> Optional[Dict[str, Any]]:
    """Load last run's artifact. A missing file means first run (None)."""
    path = Path(path)
    if not path.exists():
        log.info(f"No previous snapshot at {path}")
        return None
    try:
        snapshot = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        raise SnapshotError(f"Could not read previous snapshot {path}: {e}") from e
    _check_shape(snapshot, path)
    return snapshot


def _check_shape(snapshot: Any, path: Path) -> None:
    if not isinstance(snapshot, dict):
        raise SnapshotError(f"Previous snapshot {path} is not a JSON object")
    cot = snapshot.get("cot")
    if cot is None:
        return
    if not isinstance(cot, dict):
        raise SnapshotError(f"Previous snapshot {path}: 'cot' is not an object")
    rows = cot.get("rows", [])
    if not isinstance(rows, list):
        raise SnapshotError(f"Previous snapshot {path}: 'cot.rows' is not a list")
    for row in rows:
        if not isinstance(row, dict):
            raise SnapshotError(f"Previous snapshot {path}: COT row is not an object: {row!r}")
        value = row.get("value")
        if value is not None and (isinstance(value, bool) or not isinstance(value, (int, float))):
            raise SnapshotError(f"Previous snapshot {path}: non-numeric value in row {row.get('label')!r}")


def _row_values(cot: Dict[str, Any]) -> Dict[str, Any]:
    return {r.get("label"): r.get("value") for r in cot.get("rows") or [] if isinstance(r, dict)}


def reconcile(record: ParsedRecord, snapshot: Optional[Dict[str, Any]]) -> PriorValues:
    """
    Previous values are only carried forward when the report week has moved on.

    Re-fetching the same week (or having no snapshot at all) yields all None,
    so an unchanged report never shows up as a zero delta.
    """
    cot = (snapshot or {}).get("cot") or {}
    prev_week = cot.get("weekEnding")
    if not prev_week or prev_week == record.report_date:
        return PriorValues()

    values = _row_values(cot)
    log.info(f"New report week {record.report_date} (previous {prev_week})")
    return PriorValues(
        net=values.get(NET_LABEL),
        long=values.get(LONG_LABEL),
        short=values.get(SHORT_LABEL),
    )


def record_from_snapshot(snapshot: Dict[str, Any]) -> ParsedRecord:
    """Rebuild a record from a previous artifact (used when no live source is available)."""
    cot = snapshot.get("cot") or {}
    if not cot.get("weekEnding"):
        raise SnapshotError("Previous snapshot has no COT section to reuse.")
    values = _row_values(cot)
    return ParsedRecord(
        market=cot.get("instrument") or "",
        report_date=cot["weekEnding"],
        non_comm_long=decode_number(values.get(LONG_LABEL)),
        non_comm_short=decode_number(values.get(SHORT_LABEL)),
    )
