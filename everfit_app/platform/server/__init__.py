"""HTTP server infrastructure module.

This module provides the FastAPI application factory and HTTP-related utilities:
- Application factory
- Route handlers
- Socket binding and server startup
"""

from everfit_app.platform.server.app import create_app
from everfit_app.platform.server.bootstrap import bind_socket, serve
from everfit_app.platform.server.exceptions import StartupBindError

__all__ = [
    "bind_socket",
    "create_app",
    "serve",
    "StartupBindError",
]
