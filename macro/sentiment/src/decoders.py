"""Token-level helpers shared by the locator and record parser."""
import re
from typing import Any

import numpy as np
import pandas as pd

# en dash, em dash, minus sign, figure dash
_DASHES_RE = re.compile("[–—−‒]")
_SPACES_RE = re.compile(r"\s+")

_ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_YYMMDD_RE = re.compile(r"^(\d{2})(\d{2})(\d{2})$")
_SLASH_DATE_RE = re.compile(r"^(\d{1,2})/(\d{1,2})/(\d{2}|\d{4})$")

# Two-digit years above the pivot belong to the 1900s. Deliberate approximation:
# COT reports start in 1986, so nothing in the feed is ambiguous before 2070.
YEAR_PIVOT = 70


def normalize_text(text: str) -> str:
    """Uppercase, fold dash variants to '-', collapse whitespace."""
    text = _DASHES_RE.sub("-", str(text))
    return _SPACES_RE.sub(" ", text).strip().upper()


def _expand_year(yy: str) -> str:
    n = int(yy)
    return str(1900 + n if n > YEAR_PIVOT else 2000 + n)


def decode_date(token: str) -> str:
    """
    Convert a report date token to YYYY-MM-DD.

    Accepts YYYY-MM-DD, YYMMDD and MM/DD/YY[YY]. Anything else is returned
    unchanged so the caller can still display it.
    """
    s = str(token).strip().strip('"').strip()
    if _ISO_DATE_RE.match(s):
        return s

    m = _YYMMDD_RE.match(s)
    if m:
        yy, mm, dd = m.groups()
        return f"{_expand_year(yy)}-{mm}-{dd}"

    m = _SLASH_DATE_RE.match(s)
    if m:
        mm, dd, year = m.groups()
        if len(year) == 2:
            year = _expand_year(year)
        return f"{year}-{mm}-{dd}"

    return token


def decode_number(token: Any) -> float:
    """Parse a report number like '12,345', '"1,000"' or '+50'. Bad input -> 0."""
    if token is None:
        return 0
    s = str(token).replace(",", "").replace('"', "").strip().lstrip("+")
    n = pd.to_numeric(s, errors="coerce")
    if pd.isna(n) or not np.isfinite(n):
        return 0
    n = float(n)
    return int(n) if n.is_integer() else n
