"""Instrument configurations for the COT sentiment snapshot."""
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Tuple

CFTC_LEGACY_FUTURES_URL = "https://www.cftc.gov/dea/newcot/deafut.txt"
BARCHART_COT_ENDPOINT = "https://ondemand.websol.barchart.com/getCommitmentOfTraders.json"

DEFAULT_OUT_PATH = Path("data") / "sentiment.json"

NET_LABEL = "Non-Comm Net"
LONG_LABEL = "Non-Comm Long"
SHORT_LABEL = "Non-Comm Short"


@dataclass(frozen=True)
class SentimentConfig:
    """Everything needed to find and label one instrument in the weekly report.

    Patterns are matched against normalized report lines (see
    decoders.normalize_text), earliest entry first.
    """

    name: str  # e.g., "NASDAQ_MINI"
    instrument: str  # label written to the artifact
    patterns: Tuple[str, ...]

    # Fuzzy fallback: a line must contain both tokens
    fuzzy_anchor: str = ""
    fuzzy_qualifier: str = ""

    # Sources
    cftc_url: str = CFTC_LEGACY_FUTURES_URL
    barchart_symbol: str = ""

    # Display ceilings for the gauge rows
    ceilings: Dict[str, int] = field(default_factory=dict)


CONFIGS = {
    "NASDAQ_MINI": SentimentConfig(
        name="NASDAQ_MINI",
        instrument="NASDAQ-100 E-mini",
        patterns=(
            "NASDAQ-100 STOCK INDEX (MINI) - CHICAGO MERCANTILE EXCHANGE",
            "E-MINI NASDAQ-100 STOCK INDEX",
            "NASDAQ-100 STOCK INDEX (MINI)",
            "NASDAQ MINI - CHICAGO MERCANTILE EXCHANGE",
            "NASDAQ MINI",
        ),
        fuzzy_anchor="NASDAQ",
        fuzzy_qualifier="MINI",
        barchart_symbol="E-mini NASDAQ-100",
        ceilings={NET_LABEL: 80000, LONG_LABEL: 180000, SHORT_LABEL: 180000},
    ),
    "SP500_MINI": SentimentConfig(
        name="SP500_MINI",
        instrument="S&P 500 E-mini",
        patterns=(
            "E-MINI S&P 500 - CHICAGO MERCANTILE EXCHANGE",
            "E-MINI S&P 500 STOCK INDEX",
            "E-MINI S&P 500",
        ),
        fuzzy_anchor="S&P 500",
        fuzzy_qualifier="MINI",
        barchart_symbol="E-mini S&P 500",
        ceilings={NET_LABEL: 400000, LONG_LABEL: 800000, SHORT_LABEL: 800000},
    ),
}


def get_config(name: str) -> SentimentConfig:
    """Get configuration for an instrument key (case-insensitive)."""
    key = name.upper()
    if key not in CONFIGS:
        available = ", ".join(CONFIGS.keys())
        raise ValueError(f"Unknown instrument '{name}'. Available: {available}")
    return CONFIGS[key]


def list_configs() -> List[str]:
    return list(CONFIGS.keys())
