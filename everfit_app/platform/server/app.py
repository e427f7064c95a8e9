"""FastAPI application factory and server configuration.

This module creates and configures the FastAPI application with all middleware,
routes, and lifecycle management. Nothing here opens a socket; binding lives
in :mod:`everfit_app.platform.server.bootstrap`.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from everfit_app.platform.constants import SERVICE_NAME
from everfit_app.platform.observability.errors import initialize_bugsnag
from everfit_app.platform.observability.logging import configure_logging, get_logger
from everfit_app.platform.observability.metrics import prometheus_middleware
from everfit_app.platform.server.middlewares import CorrelationIdMiddleware
from everfit_app.platform.server.routes import root as root_router
from everfit_app.platform.settings import Settings

logger = get_logger(__name__)


def lifespan_closure(settings: Settings):
    @asynccontextmanager
    async def lifespan(app):
        """
        Use this to initialize all of the singleton dependencies and shared
        objects.  i.e. logging, bugsnag, etc
        """
        configure_logging(settings.app_http.log_level, json_output=settings.json_logs)
        initialize_bugsnag(settings.bugsnag.api_key, settings.bugsnag.release_stage)

        app.state.settings = settings

        logger.info("%s application startup complete", SERVICE_NAME)
        yield
        logger.info("%s application shutdown", SERVICE_NAME)

    return lifespan


def create_app(settings: Settings) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Application settings instance

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(title=SERVICE_NAME, lifespan=lifespan_closure(settings))
    app.add_middleware(CorrelationIdMiddleware)
    app.middleware("http")(prometheus_middleware)

    app.include_router(root_router)

    return app
