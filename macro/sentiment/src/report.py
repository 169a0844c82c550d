"""Assemble, persist and display the sentiment artifact."""
import json
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

import pandas as pd
from rich.console import Console
from rich.table import Table

from .aaii import AaiiReading
from .config import LONG_LABEL, NET_LABEL, SHORT_LABEL, SentimentConfig
from .records import ParsedRecord
from .snapshot import PriorValues

ARTIFACT_VERSION = 1

console = Console()


def build_cot_section(
    record: ParsedRecord,
    prior: PriorValues,
    config: SentimentConfig,
    source: str,
) -> Dict[str, Any]:
    rows = [
        (NET_LABEL, record.net, prior.net),
        (LONG_LABEL, record.non_comm_long, prior.long),
        (SHORT_LABEL, record.non_comm_short, prior.short),
    ]
    return {
        "weekEnding": record.report_date,
        "source": source,
        "instrument": config.instrument,
        "rows": [
            {"label": label, "value": value, "prev": prev, "max": config.ceilings.get(label)}
            for label, value, prev in rows
        ],
    }


def build_aaii_section(week_ending: str, readings: Iterable[AaiiReading]) -> Dict[str, Any]:
    return {
        "weekEnding": week_ending,
        "source": "manual",
        "data": [{"label": r.label, "pct": r.pct, "prev": r.prev} for r in readings],
    }


def build_artifact(cot: dict, aaii: dict, updated: Optional[str] = None) -> Dict[str, Any]:
    if updated is None:
        updated = pd.Timestamp.now(tz="UTC").isoformat()
    return {"cot": cot, "aaii": aaii, "updated": updated, "version": ARTIFACT_VERSION}


def save_json(obj: dict, path: Path):
    """Save dict to JSON, replacing the target in one step."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(json.dumps(obj, indent=2))
        os.replace(tmp, path)
    except BaseException:
        if os.path.exists(tmp):
            os.unlink(tmp)
        raise


def _fmt(v) -> str:
    if v is None:
        return "N/A"
    return f"{v:,.0f}"


def print_summary(artifact: Dict[str, Any]) -> None:
    cot = artifact["cot"]
    table = Table(title=f"{cot['instrument']} COT - week ending {cot['weekEnding']} ({cot['source']})")
    table.add_column("Row")
    table.add_column("Value", justify="right")
    table.add_column("Prev", justify="right")
    table.add_column("Change", justify="right")
    for row in cot["rows"]:
        change = None if row["prev"] is None else row["value"] - row["prev"]
        style = "" if change is None else ("green" if change >= 0 else "red")
        table.add_row(row["label"], _fmt(row["value"]), _fmt(row["prev"]), f"[{style}]{_fmt(change)}[/]" if style else "N/A")
    console.print(table)
