"""Metrics adapters."""

from sytralrt.adapters.metrics.prometheus_metrics import (
    PrometheusFeedMetrics,
    PrometheusMetricsSink,
)

__all__ = ["PrometheusFeedMetrics", "PrometheusMetricsSink"]
