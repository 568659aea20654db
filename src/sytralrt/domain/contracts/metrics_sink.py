"""Protocols for refresh metrics."""

from typing import Protocol

from sytralrt.domain.models.feed import Feed


class FeedMetricsProtocol(Protocol):
    """Metrics handle for a single feed."""

    def observe_load_duration(self, seconds: float) -> None:
        """Record the duration of a successful refresh cycle."""
        ...

    def increment_load_errors(self) -> None:
        """Count a failed refresh cycle."""
        ...


class MetricsSinkProtocol(Protocol):
    """Hands out one metrics handle per feed."""

    def register_feed(self, feed: Feed) -> FeedMetricsProtocol:
        """Register the metrics of feed and return its handle."""
        ...
