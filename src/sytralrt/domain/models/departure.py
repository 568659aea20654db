"""Departure domain model."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Departure:
    """Represents a single scheduled or real-time departure from a stop point."""

    line: str
    station: str  # Stop area code
    stop_point: str
    destination: str
    direction: str
    time: datetime
    flag: str  # Free-form category, e.g. "T" (theoretical) or "R" (real time)
