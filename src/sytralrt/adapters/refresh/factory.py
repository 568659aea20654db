"""Wiring of one refresher per configured feed."""

import logging
from collections.abc import Iterable
from datetime import tzinfo

from sytralrt.adapters.loaders.pipelines import pipeline_for
from sytralrt.adapters.refresh.feed_refresher import (
    FeedRefresher,
    FeedRefresherServices,
    RefreshPolicy,
)
from sytralrt.domain.contracts.byte_retriever import ByteRetrieverProtocol
from sytralrt.domain.contracts.metrics_sink import MetricsSinkProtocol
from sytralrt.domain.contracts.snapshot_store import SnapshotStoreProtocol
from sytralrt.domain.models.source import FeedSource

logger = logging.getLogger(__name__)


def build_feed_refreshers(
    sources: Iterable[FeedSource],
    store: SnapshotStoreProtocol,
    retriever: ByteRetrieverProtocol,
    metrics_sink: MetricsSinkProtocol,
    tz: tzinfo,
    policy: RefreshPolicy | None = None,
) -> list[FeedRefresher]:
    """Create a refresher per source, registering the metrics of each feed once."""
    refreshers = []
    for source in sources:
        services = FeedRefresherServices(
            store=store,
            retriever=retriever,
            metrics=metrics_sink.register_feed(source.feed),
        )
        refreshers.append(FeedRefresher(source, pipeline_for(source.feed, tz), services, policy))
        logger.info(f"Configured {source.feed} feed from {source.location}")
    return refreshers
