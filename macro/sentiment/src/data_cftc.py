"""Download the weekly CFTC legacy futures-only report."""
import logging

import requests

from .config import CFTC_LEGACY_FUTURES_URL
from .errors import TransportError

log = logging.getLogger(__name__)


def fetch_cftc_report(url: str = CFTC_LEGACY_FUTURES_URL, timeout: float = 60) -> str:
    # One attempt only; rescheduling a failed run is left to the caller.
    log.info(f"Downloading CFTC report {url}")
    try:
        r = requests.get(url, timeout=timeout)
    except requests.RequestException as e:
        raise TransportError(f"CFTC request failed: {e}") from e
    if r.status_code != 200:
        raise TransportError(f"HTTP {r.status_code} for {url}: {r.text[:500]}")
    log.info(f"Downloaded report ({len(r.text):,} characters)")
    return r.text
