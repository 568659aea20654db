"""Adapters layer - external system integrations."""

from sytralrt.adapters.config import AppConfig
from sytralrt.adapters.metrics import PrometheusMetricsSink
from sytralrt.adapters.retrieval import UriByteRetriever
from sytralrt.adapters.store import SnapshotStore

__all__ = [
    "AppConfig",
    "PrometheusMetricsSink",
    "SnapshotStore",
    "UriByteRetriever",
]
