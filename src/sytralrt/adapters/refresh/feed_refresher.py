"""Periodic refresh of one feed into the snapshot store."""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING

from sytralrt.domain.contracts.feed_refresher import FeedRefresherProtocol
from sytralrt.domain.errors import FeedError, RetrievalError

if TYPE_CHECKING:
    from sytralrt.adapters.loaders.pipelines import FeedPipeline
    from sytralrt.domain.contracts.byte_retriever import ByteRetrieverProtocol
    from sytralrt.domain.contracts.metrics_sink import FeedMetricsProtocol
    from sytralrt.domain.contracts.snapshot_store import SnapshotStoreProtocol
    from sytralrt.domain.models.source import FeedSource

logger = logging.getLogger(__name__)


def _consume_outcome(future: asyncio.Future) -> None:
    """Mark the retrieval outcome as retrieved, even when nobody awaits it anymore."""
    if not future.cancelled() and future.exception() is not None:
        logger.debug(f"Retrieval finished with error: {future.exception()}")


@dataclass(frozen=True)
class RefreshPolicy:
    """Timing rules shared by every feed."""

    retrieval_timeout_seconds: float | None = 60.0
    min_refresh_interval_seconds: float = 1.0  # Shorter intervals disable background refresh


@dataclass(frozen=True)
class FeedRefresherServices:
    """Collaborators used by a feed refresher."""

    store: SnapshotStoreProtocol
    retriever: ByteRetrieverProtocol
    metrics: FeedMetricsProtocol


class FeedRefresher(FeedRefresherProtocol):
    """Retrieves, parses and stores one feed, then sleeps, forever.

    Refresh cycles of a feed never overlap. A failed cycle is logged and
    counted and leaves the previous snapshot visible.
    """

    def __init__(
        self,
        source: FeedSource,
        pipeline: FeedPipeline,
        services: FeedRefresherServices,
        policy: RefreshPolicy | None = None,
    ) -> None:
        """Initialize the refresher.

        Args:
            source: Location and refresh interval of the feed.
            pipeline: Turns the raw bytes of the feed into records.
            services: Store, retriever and metrics handle.
            policy: Timeout and refresh-disable rules.
        """
        self.source = source
        self.feed = source.feed
        self.pipeline = pipeline
        self.store = services.store
        self.retriever = services.retriever
        self.metrics = services.metrics
        self.policy = policy or RefreshPolicy()
        self._task: asyncio.Task | None = None
        self._retrieval: asyncio.Future | None = None

    @property
    def refresh_enabled(self) -> bool:
        """Whether the background loop runs after the initial load."""
        return self.source.refresh_interval_seconds >= self.policy.min_refresh_interval_seconds

    async def refresh(self) -> bool:
        """Run one refresh cycle.

        Returns:
            True if the snapshot was replaced, False if the cycle failed.
        """
        begin = time.perf_counter()
        try:
            data = await self._retrieve()
            records = await asyncio.to_thread(self.pipeline, data)
            self.store.replace(self.feed, records)
        except FeedError as e:
            self.metrics.increment_load_errors()
            logger.error(f"Error while reloading {self.feed} data: {e} ({self.source.location})")
            return False
        except Exception:
            self.metrics.increment_load_errors()
            logger.exception(f"Unexpected error while reloading {self.feed} data")
            return False

        duration = time.perf_counter() - begin
        self.metrics.observe_load_duration(duration)
        logger.debug(
            f"{self.feed.capitalize()} data updated: {len(records)} record(s) in {duration:.3f}s"
        )
        return True

    async def _retrieve(self) -> bytes:
        """Fetch the feed bytes in a worker thread, bounded by the retrieval timeout.

        A timed out retrieval keeps running in its thread; until it finishes,
        later cycles fail instead of starting a second retrieval of the feed.
        """
        if self._retrieval is not None and not self._retrieval.done():
            raise RetrievalError(
                f"Previous retrieval of {self.source.location} is still running, skipping cycle"
            )

        timeout = self.policy.retrieval_timeout_seconds
        self._retrieval = asyncio.ensure_future(
            asyncio.to_thread(self.retriever.retrieve, self.source.location, timeout)
        )
        self._retrieval.add_done_callback(_consume_outcome)
        try:
            return await asyncio.wait_for(asyncio.shield(self._retrieval), timeout=timeout)
        except TimeoutError as e:
            raise RetrievalError(
                f"Timed out after {timeout}s fetching {self.source.location}"
            ) from e

    async def start(self) -> None:
        """Start the background refresh loop."""
        if not self.refresh_enabled:
            logger.info(
                f"{self.feed.capitalize()} data refreshing is disabled "
                f"(interval {self.source.refresh_interval_seconds}s)"
            )
            return

        if self._task is not None and not self._task.done():
            logger.warning(f"{self.feed.capitalize()} refresher already running")
            return

        self._task = asyncio.create_task(self._refresh_loop(), name=f"refresh-{self.feed}")
        logger.info(
            f"Started {self.feed} refresher (every {self.source.refresh_interval_seconds}s)"
        )

    async def stop(self) -> None:
        """Stop the background refresh loop."""
        if self._task and not self._task.done():
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                logger.info(f"{self.feed.capitalize()} refresher cancelled")
            logger.info(f"Stopped {self.feed} refresher")
        self._task = None

    async def _refresh_loop(self) -> None:
        """Sleep for the refresh interval, then refresh, until cancelled."""
        try:
            while True:
                await asyncio.sleep(self.source.refresh_interval_seconds)
                await self.refresh()
        except asyncio.CancelledError:
            logger.debug(f"{self.feed.capitalize()} refresh loop cancelled")
            raise
