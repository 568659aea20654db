"""Protocol for the feed snapshot store."""

from collections.abc import Iterable
from typing import Any, Protocol

from sytralrt.domain.models.feed import Feed, FeedSnapshot


class SnapshotStoreProtocol(Protocol):
    """Holds the latest snapshot of each feed."""

    def replace(self, feed: Feed, records: Iterable[Any]) -> FeedSnapshot[Any]:
        """Atomically make records the visible snapshot of feed."""
        ...

    def get(self, feed: Feed) -> FeedSnapshot[Any]:
        """Return the currently visible snapshot of feed."""
        ...
