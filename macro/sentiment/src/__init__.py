from .decoders import decode_date, decode_number, normalize_text
from .errors import CotError, LocatorError, RecordFormatError, SnapshotError, TransportError
from .locator import find_row, locate_row
from .records import LineFormat, ParsedRecord, detect_format, parse_record
from .snapshot import PriorValues, load_snapshot, reconcile

__all__ = [
    "decode_date",
    "decode_number",
    "normalize_text",
    "CotError",
    "LocatorError",
    "RecordFormatError",
    "SnapshotError",
    "TransportError",
    "find_row",
    "locate_row",
    "LineFormat",
    "ParsedRecord",
    "detect_format",
    "parse_record",
    "PriorValues",
    "load_snapshot",
    "reconcile",
]
