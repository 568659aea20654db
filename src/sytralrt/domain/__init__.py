"""Domain layer - feed records, snapshots and contracts."""

from sytralrt.domain.errors import (
    ConfigError,
    DecodeError,
    FeedError,
    FormatError,
    RetrievalError,
    TimeParseError,
)
from sytralrt.domain.models import (
    Departure,
    EquipmentDetail,
    Feed,
    FeedSnapshot,
    Parking,
)

__all__ = [
    "ConfigError",
    "DecodeError",
    "Departure",
    "EquipmentDetail",
    "Feed",
    "FeedError",
    "FeedSnapshot",
    "FormatError",
    "Parking",
    "RetrievalError",
    "TimeParseError",
]
