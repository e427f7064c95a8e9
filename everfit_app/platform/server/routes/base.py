"""Base HTTP endpoints for health checks, metrics, and service info.

This module provides infrastructure endpoints that are typically used
by load balancers, monitoring systems, and service discovery.
"""

from enum import Enum

from fastapi import APIRouter, Response

from everfit_app.platform.observability.metrics import metrics as prom_metrics
from everfit_app.platform.server.health import HealthStatus, metadata

base_router = APIRouter()
base_tags: list[Enum | str] = ["base"]


@base_router.get("/health", tags=base_tags, response_model=HealthStatus)
async def health() -> HealthStatus:
    """Health check endpoint for load balancers and orchestrators.

    Returns:
        200 OK with ``{"status": "healthy"}``
    """
    return HealthStatus()


@base_router.get("/info", tags=base_tags)
async def info():
    return metadata.info()


@base_router.get("/metrics", tags=base_tags)
async def metrics():
    body, media_type = prom_metrics()
    return Response(body, media_type=media_type)
