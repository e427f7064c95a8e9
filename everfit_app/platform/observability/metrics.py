"""Prometheus metrics collection and HTTP middleware.

This module provides the HTTP request duration histogram, the middleware
that feeds it, and the exposition helper behind ``/metrics``.
"""

from time import monotonic
from typing import NamedTuple

import prometheus_client


class HTTPLabels(NamedTuple):
    method: str
    path: str
    http_status: str


_NXX_LUT = ["1XX", "2XX", "3XX", "4XX", "5XX"]

PATH_NOT_FOUND = "path-not-found"


def http_status_nxx(status: int) -> str:
    """A coarser 2XX, 4XX, 5XX"""
    return _NXX_LUT[status // 100 - 1]


BUCKETS = (
    # these are log spaced with 1 sig-fig rounding so there are 3 per decade
    # 3 div/decade = 1,   2.15,   4.64,   10
    0.0002,  # 200 μs
    0.0005,
    0.001,  # 1 ms
    0.002,
    0.005,
    0.01,
    0.02,
    0.05,
    0.1,
    0.2,
    0.5,
    1,
    2,
    5,
    10,
    20,
    float("inf"),
)


def get_path(scope) -> str:
    """Return the path template of the route that handled the request.

    The router stores the matched route in the ASGI scope, also on a
    method mismatch.

    Args:
        scope: ASGI request scope dictionary

    Returns:
        The matched route path template, or "path-not-found" if no route matched
    """
    route = scope.get("route")
    if route is None:
        return PATH_NOT_FOUND
    return getattr(route, "path", PATH_NOT_FOUND)


async def prometheus_middleware(request, call_next):
    """HTTP middleware that records request duration metrics.

    Args:
        request: The incoming HTTP request
        call_next: The next middleware/handler in the chain

    Returns:
        The HTTP response from the downstream handler
    """
    start_time = monotonic()
    response = await call_next(request)
    elapsed_sec = monotonic() - start_time
    path = get_path(request.scope)

    labels = HTTPLabels(
        method=request.method,
        path=path,
        http_status=http_status_nxx(response.status_code),
    )
    http_histogram.labels(*labels).observe(elapsed_sec)

    return response


def setup_http_metrics(registry):
    """Create the HTTP request duration histogram.

    Args:
        registry: Prometheus registry to register the metric with

    Returns:
        Histogram for tracking HTTP request durations by method, path, and status
    """
    return prometheus_client.Histogram(
        name="http_request_duration_seconds",
        documentation="Request duration (seconds)",
        labelnames=HTTPLabels._fields,
        registry=registry,
        buckets=BUCKETS,
    )


http_histogram = setup_http_metrics(registry=prometheus_client.REGISTRY)


def metrics() -> tuple[bytes, str]:
    """Generate Prometheus metrics output for the /metrics endpoint.

    Returns:
        Tuple of (metrics_body, content_type) for the HTTP response
    """
    return (
        prometheus_client.generate_latest(prometheus_client.REGISTRY),
        prometheus_client.CONTENT_TYPE_LATEST,
    )
