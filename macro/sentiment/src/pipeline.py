"""COT sentiment pipeline: fetch -> locate -> parse -> reconcile -> write."""
import logging
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Sequence, Tuple

from .aaii import AaiiReading, read_aaii_readings
from .config import SentimentConfig
from .data_barchart import fetch_barchart_record
from .data_cftc import fetch_cftc_report
from .errors import CotError
from .locator import locate_row
from .records import ParsedRecord, parse_record
from .report import build_aaii_section, build_artifact, build_cot_section, save_json
from .snapshot import reconcile, record_from_snapshot

log = logging.getLogger(__name__)

PROVIDERS = ("cftc", "barchart")


class SourceStrategy(Enum):
    LIVE_FETCH = "live_fetch"
    REUSE_LAST_SNAPSHOT = "reuse_last_snapshot"
    FAIL = "fail"


def choose_strategy(provider: str, api_key: Optional[str], snapshot: Optional[Dict[str, Any]]) -> SourceStrategy:
    """Pick how to obtain this week's record given provider credentials and prior state."""
    if provider == "cftc":
        return SourceStrategy.LIVE_FETCH
    if provider != "barchart":
        raise ValueError(f"Unknown provider '{provider}'. Valid: {list(PROVIDERS)}")
    if api_key:
        return SourceStrategy.LIVE_FETCH
    if snapshot and snapshot.get("cot"):
        return SourceStrategy.REUSE_LAST_SNAPSHOT
    return SourceStrategy.FAIL


def record_from_report(text: str, config: SentimentConfig) -> ParsedRecord:
    """Locate the configured instrument in raw report text and parse it."""
    lines = text.splitlines()
    row = locate_row(
        lines,
        config.patterns,
        fuzzy_anchor=config.fuzzy_anchor,
        fuzzy_qualifier=config.fuzzy_qualifier,
    )
    record = parse_record(row)
    log.info(
        f"{record.market}: {record.report_date} long={record.non_comm_long:,.0f} "
        f"short={record.non_comm_short:,.0f}"
    )
    return record


def acquire_record(
    config: SentimentConfig,
    strategy: SourceStrategy,
    provider: str,
    snapshot: Optional[Dict[str, Any]],
    api_key: Optional[str] = None,
    url: Optional[str] = None,
) -> Tuple[ParsedRecord, str]:
    """Return (record, source label) according to the selected strategy."""
    if strategy is SourceStrategy.FAIL:
        raise CotError("Missing API key and no previous data to reuse.")

    if strategy is SourceStrategy.REUSE_LAST_SNAPSHOT:
        log.warning("No BARCHART_API_KEY; reusing previous snapshot.")
        source = (snapshot.get("cot") or {}).get("source") or "unknown"
        return record_from_snapshot(snapshot), source

    if provider == "barchart":
        kwargs = {"url": url} if url else {}
        return fetch_barchart_record(config.barchart_symbol, api_key, **kwargs), "barchart"

    text = fetch_cftc_report(url or config.cftc_url)
    return record_from_report(text, config), "cftc"


def run_pipeline(
    config: SentimentConfig,
    strategy: SourceStrategy,
    out_path: Path,
    snapshot: Optional[Dict[str, Any]] = None,
    provider: str = "cftc",
    api_key: Optional[str] = None,
    url: Optional[str] = None,
    aaii: Optional[Sequence[AaiiReading]] = None,
) -> dict:
    """Build this week's artifact and write it to out_path. Nothing is written on error."""
    record, source = acquire_record(config, strategy, provider, snapshot, api_key=api_key, url=url)
    prior = reconcile(record, snapshot)

    if aaii is None:
        aaii = read_aaii_readings()

    artifact = build_artifact(
        cot=build_cot_section(record, prior, config, source),
        aaii=build_aaii_section(record.report_date, aaii),
    )
    save_json(artifact, out_path)
    return artifact
