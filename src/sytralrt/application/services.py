"""Application services (use cases) for feed refreshing."""

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from sytralrt.domain.contracts import FeedRefresherProtocol
    from sytralrt.domain.models import Feed


class FeedRefreshService:
    """Runs the initial load of every feed, then their background refresh loops."""

    def __init__(self, refreshers: Sequence["FeedRefresherProtocol"]) -> None:
        """Initialize with one refresher per configured feed."""
        self._refreshers = list(refreshers)

    @property
    def feeds(self) -> list["Feed"]:
        return [refresher.feed for refresher in self._refreshers]

    async def load_all(self) -> dict["Feed", bool]:
        """Load every feed once, one after the other.

        A feed that fails to load is reported but does not prevent the
        others from loading nor the service from starting.

        Returns:
            Whether the initial load succeeded, per feed.
        """
        results: dict[Feed, bool] = {}
        for refresher in self._refreshers:
            results[refresher.feed] = await refresher.refresh()
            if not results[refresher.feed]:
                logger.error(f"Impossible to load {refresher.feed} data at startup")
        return results

    async def start(self) -> None:
        """Start the background refresh loop of every feed."""
        for refresher in self._refreshers:
            await refresher.start()

    async def stop(self) -> None:
        """Stop every background refresh loop."""
        for refresher in self._refreshers:
            await refresher.stop()
