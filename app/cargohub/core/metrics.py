from __future__ import annotations

from dataclasses import dataclass

from prometheus_client import CollectorRegistry, Counter, Histogram, generate_latest
from prometheus_client.exposition import CONTENT_TYPE_LATEST

from app.cargohub.core.config import settings

_LATENCY_BUCKETS_MS = (5, 10, 25, 50, 100, 250, 500, 1000, 2500, 5000, 10000)


@dataclass
class MetricsSnapshot:
    content: bytes
    content_type: str


class Metrics:
    """Process-wide Prometheus registry; every recorder is a no-op when metrics are disabled."""

    def __init__(self, enabled: bool | None = None) -> None:
        self.enabled = bool(settings.METRICS_ENABLED if enabled is None else enabled)
        if self.enabled:
            self._build()

    def _build(self) -> None:
        self._registry = CollectorRegistry()
        http_labels = ["route", "method", "status"]
        self._requests = Counter(
            "http_requests_total", "HTTP requests by route, method and status.", http_labels, registry=self._registry
        )
        self._latency = Histogram(
            "http_request_duration_ms",
            "HTTP request latency in milliseconds.",
            http_labels,
            buckets=_LATENCY_BUCKETS_MS,
            registry=self._registry,
        )
        self._lock_timeouts = Counter(
            "lock_wait_timeout_total", "Database lock wait timeouts.", registry=self._registry
        )
        self._transfer_events = Counter(
            "transfer_events_total", "Transfer ledger writes by action.", ["action"], registry=self._registry
        )
        self._dock_events = Counter(
            "dock_events_total", "Dock occupancy changes by action.", ["action"], registry=self._registry
        )

    def reset(self) -> None:
        if self.enabled:
            self._build()

    def record_http_request(self, *, route: str, method: str, status_code: int, latency_ms: float) -> None:
        if not self.enabled:
            return
        labels = {"route": route, "method": method, "status": str(status_code)}
        self._requests.labels(**labels).inc()
        self._latency.labels(**labels).observe(latency_ms)

    def increment_lock_wait_timeout(self) -> None:
        if self.enabled:
            self._lock_timeouts.inc()

    def increment_transfer_event(self, action: str) -> None:
        if self.enabled:
            self._transfer_events.labels(action=action).inc()

    def increment_dock_event(self, action: str) -> None:
        if self.enabled:
            self._dock_events.labels(action=action).inc()

    def render(self) -> MetricsSnapshot:
        if not self.enabled:
            return MetricsSnapshot(content=b"metrics_disabled\n", content_type="text/plain")
        return MetricsSnapshot(content=generate_latest(self._registry), content_type=CONTENT_TYPE_LATEST)


metrics = Metrics()
