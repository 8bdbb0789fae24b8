"""Prometheus metrics exposed by the HTTP server."""
from __future__ import annotations

import os

import psutil
from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    GCCollector,
    Gauge,
    Histogram,
    PlatformCollector,
    ProcessCollector,
    generate_latest,
)

REQUEST_DURATION_BUCKETS = (0.1, 0.3, 0.5, 1, 1.5, 2, 3)


class Metrics:
    """Registry holding the default process metrics and the application metrics."""

    content_type = CONTENT_TYPE_LATEST

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        self.registry = registry or CollectorRegistry()
        self._process = psutil.Process(os.getpid())

        ProcessCollector(registry=self.registry)
        PlatformCollector(registry=self.registry)
        GCCollector(registry=self.registry)

        self.requests_total = Counter(
            "app_request_operations_total",
            "The total number of processed requests",
            registry=self.registry,
        )
        self.memory_usage = Gauge(
            "app_memory_usage_bytes",
            "Resident memory usage of the process in bytes",
            registry=self.registry,
        )
        self.memory_usage.set_function(self._read_memory_usage)

        self.request_duration = Histogram(
            "http_request_duration_seconds",
            "Duration of HTTP requests in seconds",
            ["method", "status_code", "route"],
            buckets=REQUEST_DURATION_BUCKETS,
            registry=self.registry,
        )

    def _read_memory_usage(self) -> float:
        return float(self._process.memory_info().rss)

    def observe_request(self, method: str, status_code: int, route: str, seconds: float) -> None:
        self.requests_total.inc()
        self.request_duration.labels(method, str(status_code), route).observe(seconds)

    def render(self) -> bytes:
        return generate_latest(self.registry)


__all__ = ["Metrics", "REQUEST_DURATION_BUCKETS"]
