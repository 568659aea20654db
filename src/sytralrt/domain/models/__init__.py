"""Domain models for transit operational feeds."""

from sytralrt.domain.models.departure import Departure
from sytralrt.domain.models.equipment import EquipmentDetail
from sytralrt.domain.models.feed import Feed, FeedSnapshot
from sytralrt.domain.models.parking import Parking
from sytralrt.domain.models.source import FeedSource, SourceLocation

__all__ = [
    "Departure",
    "EquipmentDetail",
    "Feed",
    "FeedSnapshot",
    "FeedSource",
    "Parking",
    "SourceLocation",
]
