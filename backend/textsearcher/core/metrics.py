"""Prometheus metrics instrumentation."""

from __future__ import annotations

from fastapi import Response
from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)

REGISTRY = CollectorRegistry()

REQUEST_COUNT = Counter(
    "txts_requests_total",
    "Total HTTP requests",
    labelnames=("endpoint", "method", "status"),
    registry=REGISTRY,
)

REQUEST_LATENCY = Histogram(
    "txts_request_latency_seconds",
    "Latency of HTTP requests",
    labelnames=("endpoint", "method"),
    registry=REGISTRY,
)

FILES_SCANNED = Counter(
    "txts_files_scanned_total",
    "Files handed to the scanner",
    labelnames=("mode",),
    registry=REGISTRY,
)

FILES_MATCHED = Counter(
    "txts_files_matched_total",
    "Files that satisfied the query",
    labelnames=("mode",),
    registry=REGISTRY,
)

SCAN_DURATION = Histogram(
    "txts_scan_duration_seconds",
    "Wall time of a full scan",
    labelnames=("mode",),
    registry=REGISTRY,
)


def metrics_response() -> Response:
    """Return Prometheus metrics as an HTTP response."""
    payload = generate_latest(REGISTRY)
    return Response(content=payload, media_type=CONTENT_TYPE_LATEST)


__all__ = [
    "REGISTRY",
    "REQUEST_COUNT",
    "REQUEST_LATENCY",
    "FILES_SCANNED",
    "FILES_MATCHED",
    "SCAN_DURATION",
    "metrics_response",
]
