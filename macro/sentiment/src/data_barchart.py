"""Barchart OnDemand Commitments of Traders endpoint (alternate provider)."""
import logging

import requests

from .config import BARCHART_COT_ENDPOINT
from .decoders import decode_date, decode_number
from .errors import TransportError
from .records import ParsedRecord

log = logging.getLogger(__name__)


def fetch_barchart_record(symbol: str, api_key: str, url: str = BARCHART_COT_ENDPOINT, timeout: float = 60) -> ParsedRecord:
    """Fetch the latest COT result for `symbol` and map it to a ParsedRecord."""
    params = {"apikey": api_key, "symbol": symbol}
    log.info(f"Downloading Barchart COT for {symbol}")
    try:
        r = requests.get(url, params=params, timeout=timeout)
    except requests.RequestException as e:
        raise TransportError(f"Barchart request failed: {e}") from e
    if r.status_code != 200:
        raise TransportError(f"HTTP {r.status_code} from Barchart: {r.text[:500]}")

    try:
        payload = r.json()
    except ValueError as e:
        raise TransportError(f"Barchart returned invalid JSON: {e}") from e

    results = payload.get("results") if isinstance(payload, dict) else None
    row = results[0] if results else None
    if not row:
        raise TransportError("No COT result from provider")

    return ParsedRecord(
        market=str(row.get("symbol") or symbol),
        report_date=decode_date(str(row.get("reportDate", ""))),
        non_comm_long=decode_number(row.get("nonCommLong")),
        non_comm_short=decode_number(row.get("nonCommShort")),
    )
