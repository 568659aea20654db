"""Station equipment (elevator, escalator) domain model."""

from dataclasses import dataclass
from datetime import date, datetime


@dataclass(frozen=True)
class EquipmentDetail:
    """Operational status of one piece of station equipment."""

    id: str
    name: str
    type: str
    line_id: str
    station_id: str
    station_name: str
    status: str
    cause: str
    effect: str
    start_date: date | None
    end_date: date | None
    updated_at: datetime  # Shared "as-of" time of the feed document
