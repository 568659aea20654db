"""Parking domain model."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Parking:
    """Current occupancy of one parking facility."""

    id: str
    name: str
    updated_at: datetime
    available_spaces: int
    available_accessible_spaces: int | None = None
    total_spaces: int | None = None
    total_accessible_spaces: int | None = None
