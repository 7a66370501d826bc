"""
Prometheus metrics for the state container.

Metrics are created lazily by init_metrics(); until then every tracking
helper is a no-op, so library users who never enable metrics pay nothing.

Usage:
    from unistore.metrics import init_metrics, track_action, track_dispatch_duration

    init_metrics()
    track_action("SELECT_TAB")

    with track_dispatch_duration():
        ...  # reducer + notification
"""

import logging
import threading
from contextlib import contextmanager
from typing import Generator, Optional

from prometheus_client import CollectorRegistry, Counter, Gauge, Histogram, REGISTRY, start_http_server

logger = logging.getLogger(__name__)

ACTIONS_TOTAL: Optional[Counter] = None
DISPATCH_DURATION: Optional[Histogram] = None
LISTENERS: Optional[Gauge] = None

_metrics_initialized = False
_metrics_lock = threading.Lock()

# Live subscriptions across stores, counted even before init_metrics()
_listener_count = 0


def init_metrics(registry: CollectorRegistry = REGISTRY) -> None:
    """
    Initialize Prometheus metrics (call once at startup).

    Thread-safe via module-level lock; repeated calls are no-ops.
    """
    global ACTIONS_TOTAL, DISPATCH_DURATION, LISTENERS, _metrics_initialized

    with _metrics_lock:
        if _metrics_initialized:
            return

        # Dispatched plain actions (labels: kind)
        ACTIONS_TOTAL = Counter(
            "unistore_actions_total",
            "Total number of plain actions reduced by a store",
            labelnames=["kind"],
            registry=registry,
        )

        DISPATCH_DURATION = Histogram(
            "unistore_dispatch_duration_seconds",
            "Duration of one dispatch cycle (reduce + notify) in seconds",
            buckets=(0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0),
            registry=registry,
        )

        LISTENERS = Gauge(
            "unistore_listeners",
            "Number of subscribed listeners across stores",
            registry=registry,
        )
        LISTENERS.set(_listener_count)

        _metrics_initialized = True
        logger.info("Prometheus metrics initialized")


def start_metrics_server(enabled: bool, port: int) -> None:
    """
    Start Prometheus metrics HTTP server in a background thread.

    Args:
        enabled: Whether to start the server (from UNISTORE_METRICS_ENABLED)
        port: HTTP port for the /metrics endpoint
    """
    if not enabled:
        logger.info("Metrics server disabled (UNISTORE_METRICS_ENABLED=false)")
        return

    init_metrics()
    start_http_server(port, addr="0.0.0.0")
    logger.info(f"Metrics server started on http://0.0.0.0:{port}/metrics")


def track_action(kind: str) -> None:
    if ACTIONS_TOTAL is not None:
        ACTIONS_TOTAL.labels(kind=kind).inc()


@contextmanager
def track_dispatch_duration() -> Generator[None, None, None]:
    """Context manager timing one dispatch cycle."""
    if DISPATCH_DURATION is None:
        yield
        return

    with DISPATCH_DURATION.time():
        yield


def track_listeners(delta: int) -> None:
    global _listener_count

    with _metrics_lock:
        _listener_count += delta
        if LISTENERS is not None:
            LISTENERS.set(_listener_count)
