"""
Parse a located COT report line into a ParsedRecord.

The CFTC publishes the same legacy futures-only numbers both as a
comma-delimited file (deafut.txt) and as fixed-width text. A line containing a
comma is treated as delimited, anything else as fixed width.

Delimited columns used (0-based):
  0  market and exchange name (quoted)
  1  report date as YYMMDD
  2  report date as YYYY-MM-DD
  8  non-commercial long
  9  non-commercial short
"""
import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Sequence, Tuple

from .decoders import decode_date, decode_number
from .errors import RecordFormatError

log = logging.getLogger(__name__)

DELIMITED_MIN_FIELDS = 10
FIXED_WIDTH_MIN_COLUMNS = 5

MARKET_COL = 0
RAW_DATE_COL = 1
ISO_DATE_COL = 2
LONG_COL = 8
SHORT_COL = 9

# Fixed-width layouts have shifted between report revisions; (long, short)
# candidates in the order they are tried.
FIXED_WIDTH_PAIRS: Tuple[Tuple[int, int], ...] = ((3, 4), (4, 5), (2, 3), (5, 6))

_COLUMN_GAP_RE = re.compile(r" {2,}")


class LineFormat(Enum):
    DELIMITED = "delimited"
    FIXED_WIDTH = "fixed_width"


@dataclass(frozen=True)
class ParsedRecord:
    market: str
    report_date: str  # YYYY-MM-DD when the source date was recognized
    non_comm_long: float
    non_comm_short: float

    @property
    def net(self) -> float:
        return self.non_comm_long - self.non_comm_short


def detect_format(line: str) -> LineFormat:
    return LineFormat.DELIMITED if "," in line else LineFormat.FIXED_WIDTH


def split_delimited(line: str) -> List[str]:
    """Split on commas, ignoring commas inside double-quoted fields."""
    fields: List[str] = []
    current: List[str] = []
    in_quotes = False
    for ch in line.rstrip("\r\n"):
        if ch == '"':
            in_quotes = not in_quotes
            current.append(ch)
        elif ch == "," and not in_quotes:
            fields.append("".join(current).strip())
            current = []
        else:
            current.append(ch)
    fields.append("".join(current).strip())
    return fields


def split_fixed_width(line: str) -> List[str]:
    return [c for c in _COLUMN_GAP_RE.split(line.strip()) if c]


def _parse_delimited(line: str) -> ParsedRecord:
    fields = split_delimited(line)
    if len(fields) < DELIMITED_MIN_FIELDS:
        raise RecordFormatError(
            f"Delimited line has {len(fields)} fields; need at least {DELIMITED_MIN_FIELDS}: {line.strip()[:200]}"
        )

    market = fields[MARKET_COL].strip('"').strip()
    date_token = fields[ISO_DATE_COL].strip('"').strip()
    if not date_token:
        date_token = fields[RAW_DATE_COL].strip('"').strip()

    return ParsedRecord(
        market=market,
        report_date=decode_date(date_token),
        non_comm_long=decode_number(fields[LONG_COL]),
        non_comm_short=decode_number(fields[SHORT_COL]),
    )


def _probe_positions(cols: Sequence[str]) -> Tuple[float, float]:
    for long_idx, short_idx in FIXED_WIDTH_PAIRS:
        if short_idx >= len(cols):
            continue
        long_val = decode_number(cols[long_idx])
        short_val = decode_number(cols[short_idx])
        if long_val > 0 or short_val > 0:
            log.debug(f"Using fixed-width columns long={long_idx} short={short_idx}")
            return long_val, short_val
    raise RecordFormatError(f"Could not infer long/short columns from fixed-width line: {list(cols)}")


def _parse_fixed_width(line: str) -> ParsedRecord:
    cols = split_fixed_width(line)
    if len(cols) < FIXED_WIDTH_MIN_COLUMNS:
        raise RecordFormatError(
            f"Fixed-width line has {len(cols)} columns; need at least {FIXED_WIDTH_MIN_COLUMNS}: {line.strip()[:200]}"
        )

    long_val, short_val = _probe_positions(cols)
    return ParsedRecord(
        market=cols[MARKET_COL],
        report_date=decode_date(cols[1]),
        non_comm_long=long_val,
        non_comm_short=short_val,
    )


def parse_record(line: str) -> ParsedRecord:
    fmt = detect_format(line)
    log.info(f"Parsing {fmt.value} report line")
    if fmt is LineFormat.DELIMITED:
        return _parse_delimited(line)
    return _parse_fixed_width(line)
