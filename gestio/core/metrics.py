"""Prometheus metrics for the Gestio service.

Store Metrics:
- gestio_store_request_latency_seconds: Record store round-trip latency
- gestio_store_requests_total: Record store calls by table/operation/status

Repository Metrics:
- gestio_repository_operations_total: Repository calls by outcome
- gestio_repository_soft_failures_total: Updates that changed no rows

HTTP Metrics:
- gestio_http_requests_total: HTTP requests by endpoint/status
- gestio_http_request_latency_seconds: HTTP request latency
"""

import time
from contextlib import contextmanager
from typing import Generator

from prometheus_client import Counter, Histogram, REGISTRY, generate_latest
from prometheus_client.exposition import CONTENT_TYPE_LATEST


# =============================================================================
# Store Metrics
# =============================================================================

store_request_latency = Histogram(
    "gestio_store_request_latency_seconds",
    "Record store request latency in seconds",
    ["table", "operation"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0],
)

store_requests_total = Counter(
    "gestio_store_requests_total",
    "Total number of record store requests",
    ["table", "operation", "status"],  # success, failure
)


# =============================================================================
# Repository Metrics
# =============================================================================

repository_operations_total = Counter(
    "gestio_repository_operations_total",
    "Repository operations by entity, operation and outcome",
    ["entity", "operation", "outcome"],  # ok, error, soft_failure
)

repository_soft_failures = Counter(
    "gestio_repository_soft_failures_total",
    "Updates that reported success but affected zero rows",
    ["entity"],
)


# =============================================================================
# HTTP Metrics
# =============================================================================

http_requests_total = Counter(
    "gestio_http_requests_total",
    "Total HTTP requests by endpoint and status",
    ["method", "endpoint", "status"],
)

http_request_latency = Histogram(
    "gestio_http_request_latency_seconds",
    "HTTP request latency by endpoint",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)


# =============================================================================
# Helper Functions
# =============================================================================

@contextmanager
def track_store_latency(table: str, operation: str) -> Generator[None, None, None]:
    """Context manager to track record store latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        duration = time.perf_counter() - start
        store_request_latency.labels(table=table, operation=operation).observe(duration)


def record_store_success(table: str, operation: str) -> None:
    """Record a successful record store call."""
    store_requests_total.labels(table=table, operation=operation, status="success").inc()


def record_store_failure(table: str, operation: str) -> None:
    """Record a failed record store call."""
    store_requests_total.labels(table=table, operation=operation, status="failure").inc()


def record_repository_operation(entity: str, operation: str, outcome: str) -> None:
    """Record the outcome of a repository operation."""
    repository_operations_total.labels(
        entity=entity, operation=operation, outcome=outcome
    ).inc()
    if outcome == "soft_failure":
        repository_soft_failures.labels(entity=entity).inc()


def record_http_request(method: str, endpoint: str, status: int, duration: float) -> None:
    """Record an HTTP request."""
    http_requests_total.labels(method=method, endpoint=endpoint, status=str(status)).inc()
    http_request_latency.labels(method=method, endpoint=endpoint).observe(duration)


def get_metrics() -> bytes:
    """Get current metrics in Prometheus format."""
    return generate_latest(REGISTRY)


def get_metrics_content_type() -> str:
    """Get the content type for metrics response."""
    return CONTENT_TYPE_LATEST
