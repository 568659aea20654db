"""Protocols implemented by the adapters layer."""

from sytralrt.domain.contracts.byte_retriever import ByteRetrieverProtocol
from sytralrt.domain.contracts.feed_refresher import FeedRefresherProtocol
from sytralrt.domain.contracts.metrics_sink import FeedMetricsProtocol, MetricsSinkProtocol
from sytralrt.domain.contracts.record_consumer import RecordConsumerProtocol
from sytralrt.domain.contracts.snapshot_store import SnapshotStoreProtocol

__all__ = [
    "ByteRetrieverProtocol",
    "FeedMetricsProtocol",
    "FeedRefresherProtocol",
    "MetricsSinkProtocol",
    "RecordConsumerProtocol",
    "SnapshotStoreProtocol",
]
