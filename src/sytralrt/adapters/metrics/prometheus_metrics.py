"""Prometheus-backed refresh metrics."""

import logging

from prometheus_client import CollectorRegistry, Counter, Histogram

from sytralrt.domain.contracts.metrics_sink import FeedMetricsProtocol, MetricsSinkProtocol
from sytralrt.domain.models.feed import Feed

logger = logging.getLogger(__name__)

METRICS_NAMESPACE = "sytralrt"


def exponential_buckets(start: float, factor: float, count: int) -> list[float]:
    """Return count bucket bounds, the first at start, each factor times the previous."""
    return [start * factor**i for i in range(count)]


LOAD_DURATION_BUCKETS = exponential_buckets(0.001, 1.5, 15)


class PrometheusFeedMetrics(FeedMetricsProtocol):
    """Load duration histogram and error counter of one feed."""

    def __init__(self, feed: Feed, registry: CollectorRegistry) -> None:
        self.load_duration = Histogram(
            "load_durations_seconds",
            f"Duration of successful {feed} refresh cycles.",
            namespace=METRICS_NAMESPACE,
            subsystem=feed.value,
            buckets=LOAD_DURATION_BUCKETS,
            registry=registry,
        )
        self.load_errors = Counter(
            "loading_errors",
            f"Number of failed {feed} refresh cycles.",
            namespace=METRICS_NAMESPACE,
            subsystem=feed.value,
            registry=registry,
        )

    def observe_load_duration(self, seconds: float) -> None:
        self.load_duration.observe(seconds)

    def increment_load_errors(self) -> None:
        self.load_errors.inc()


class PrometheusMetricsSink(MetricsSinkProtocol):
    """Registers per-feed metrics in a registry owned by the sink."""

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        self.registry = registry if registry is not None else CollectorRegistry()
        self._feeds: dict[Feed, PrometheusFeedMetrics] = {}

    def register_feed(self, feed: Feed) -> PrometheusFeedMetrics:
        """Register the metrics of feed; registering a feed again returns the same handle."""
        if feed not in self._feeds:
            self._feeds[feed] = PrometheusFeedMetrics(feed, self.registry)
            logger.debug(f"Registered {feed} refresh metrics")
        return self._feeds[feed]
