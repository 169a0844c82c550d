"""Find the target instrument's line in a weekly COT report."""
import logging
from typing import Iterable, List, Optional, Sequence

from .decoders import normalize_text
from .errors import LocatorError

log = logging.getLogger(__name__)

NEAR_MISS_SAMPLE = 15


def _near_misses(lines: Sequence[str], normalized: Sequence[str], tokens: Iterable[str]) -> List[str]:
    tokens = [t for t in tokens if t]
    hits = []
    for raw, norm in zip(lines, normalized):
        if any(t in norm for t in tokens):
            hits.append(raw.strip())
            if len(hits) >= NEAR_MISS_SAMPLE:
                break
    return hits


def find_row(
    lines: Sequence[str],
    patterns: Sequence[str],
    fuzzy_anchor: str = "",
    fuzzy_qualifier: str = "",
) -> Optional[str]:
    """
    Return the original report line for the first matching pattern, or None.

    Patterns are tried in order; for each, lines are scanned top to bottom.
    If no pattern matches, the first line containing both fuzzy tokens is used.
    """
    normalized = [normalize_text(line) for line in lines]

    for pattern in patterns:
        p = normalize_text(pattern)
        if not p:
            continue
        for raw, norm in zip(lines, normalized):
            if p in norm:
                log.debug(f"Matched pattern {pattern!r}")
                return raw

    anchor = normalize_text(fuzzy_anchor)
    qualifier = normalize_text(fuzzy_qualifier)
    if anchor and qualifier:
        for raw, norm in zip(lines, normalized):
            if anchor in norm and qualifier in norm:
                log.warning(f"No exact pattern matched; using fuzzy match on {anchor!r} + {qualifier!r}: {raw.strip()}")
                return raw

    samples = _near_misses(lines, normalized, [anchor, qualifier])
    if samples:
        log.warning(f"Target line not found. Lines mentioning {anchor!r} or {qualifier!r} (sample):")
        for s in samples:
            log.warning(f"  {s}")
    else:
        log.warning(f"Target line not found and no line mentions {anchor!r} or {qualifier!r}.")
    return None


def locate_row(
    lines: Sequence[str],
    patterns: Sequence[str],
    fuzzy_anchor: str = "",
    fuzzy_qualifier: str = "",
) -> str:
    """Like find_row, but a miss is fatal."""
    row = find_row(lines, patterns, fuzzy_anchor=fuzzy_anchor, fuzzy_qualifier=fuzzy_qualifier)
    if row is None:
        raise LocatorError(
            f"Could not find instrument line with patterns={list(patterns)} "
            f"(fuzzy: {fuzzy_anchor!r} + {fuzzy_qualifier!r})"
        )
    return row
