"""Observability infrastructure module.

This module provides monitoring and error tracking:
- Structured logging with correlation IDs
- Prometheus metrics
- Bugsnag error reporting
"""

from everfit_app.platform.observability.errors import initialize_bugsnag
from everfit_app.platform.observability.logging import (
    configure_logging,
    correlation_id_ctx,
    get_logger,
)
from everfit_app.platform.observability.metrics import (
    BUCKETS,
    prometheus_middleware,
)

__all__ = [
    "BUCKETS",
    "configure_logging",
    "correlation_id_ctx",
    "get_logger",
    "initialize_bugsnag",
    "prometheus_middleware",
]
