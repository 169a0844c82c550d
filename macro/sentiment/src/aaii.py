"""Manual AAII sentiment survey readings, supplied through the environment."""
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .decoders import decode_number

AAII_LABELS = ("Bullish", "Neutral", "Bearish")


@dataclass(frozen=True)
class AaiiReading:
    label: str
    pct: float
    prev: float


def read_aaii_readings(environ: Optional[Mapping[str, str]] = None) -> tuple:
    """Read AAII_<LABEL> and AAII_<LABEL>_PREV; missing values default to 0."""
    env = os.environ if environ is None else environ
    readings = []
    for label in AAII_LABELS:
        key = f"AAII_{label.upper()}"
        readings.append(
            AaiiReading(
                label=label,
                pct=decode_number(env.get(key)),
                prev=decode_number(env.get(f"{key}_PREV")),
            )
        )
    return tuple(readings)
