"""Feed identifiers and snapshots."""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import Generic, TypeVar

R = TypeVar("R")


class Feed(StrEnum):
    """The independent data sources refreshed by the service."""

    DEPARTURES = "departures"
    PARKINGS = "parkings"
    EQUIPMENTS = "equipments"


@dataclass(frozen=True)
class FeedSnapshot(Generic[R]):
    """Complete, immutable set of current records for one feed."""

    feed: Feed
    records: tuple[R, ...] = ()
    loaded_at: datetime | None = None  # None until the first successful refresh

    def __len__(self) -> int:
        return len(self.records)

    @property
    def is_loaded(self) -> bool:
        """Whether at least one refresh cycle succeeded for this feed."""
        return self.loaded_at is not None
