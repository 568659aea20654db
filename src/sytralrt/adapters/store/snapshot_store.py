"""In-memory store of the latest snapshot of each feed."""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from sytralrt.domain.contracts.snapshot_store import SnapshotStoreProtocol
from sytralrt.domain.models.feed import Feed, FeedSnapshot

if TYPE_CHECKING:
    from sytralrt.domain.models.departure import Departure
    from sytralrt.domain.models.equipment import EquipmentDetail
    from sytralrt.domain.models.parking import Parking

logger = logging.getLogger(__name__)


class _SnapshotSlot:
    """Current snapshot of one feed, guarded by its own lock."""

    def __init__(self, feed: Feed) -> None:
        self.lock = threading.Lock()
        self.snapshot: FeedSnapshot[Any] = FeedSnapshot(feed=feed)


class SnapshotStore(SnapshotStoreProtocol):
    """Holds the latest snapshot of every feed.

    Each feed has its own slot and lock; the lock is held only to swap or
    read a reference to an immutable snapshot, so readers always see either
    the previous or the new generation of a feed, never a mix of both.
    Feeds are independent: there is no lock spanning several feeds.
    """

    def __init__(self) -> None:
        """Initialize the store with an empty snapshot for every feed."""
        self._slots = {feed: _SnapshotSlot(feed) for feed in Feed}

    def replace(
        self,
        feed: Feed,
        records: Iterable[Any],
        loaded_at: datetime | None = None,
    ) -> FeedSnapshot[Any]:
        """Make records the visible snapshot of feed.

        Args:
            feed: The feed to update.
            records: The complete new set of records.
            loaded_at: Time of the refresh, defaults to now (UTC).

        Returns:
            The snapshot now visible.
        """
        snapshot = FeedSnapshot(
            feed=feed,
            records=tuple(records),
            loaded_at=loaded_at or datetime.now(UTC),
        )
        slot = self._slots[feed]
        with slot.lock:
            slot.snapshot = snapshot
        logger.debug(f"Replaced {feed} snapshot with {len(snapshot)} record(s)")
        return snapshot

    def get(self, feed: Feed) -> FeedSnapshot[Any]:
        """Return the currently visible snapshot of feed."""
        slot = self._slots[feed]
        with slot.lock:
            return slot.snapshot

    def departures(self) -> tuple[Departure, ...]:
        return self.get(Feed.DEPARTURES).records

    def parkings(self) -> tuple[Parking, ...]:
        return self.get(Feed.PARKINGS).records

    def equipments(self) -> tuple[EquipmentDetail, ...]:
        return self.get(Feed.EQUIPMENTS).records

    def departures_for_stop(self, stop_id: str) -> list[Departure]:
        """Return the departures whose station or stop point is stop_id."""
        return [d for d in self.departures() if stop_id in (d.station, d.stop_point)]
