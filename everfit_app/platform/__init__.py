"""Service infrastructure module.

This module provides the plumbing shared by every endpoint:
- Settings loaded from the environment
- FastAPI server configuration and socket bootstrap
- Logging, metrics and error reporting
"""

from everfit_app.platform.server.exceptions import StartupBindError
from everfit_app.platform.settings import Settings

__all__ = [
    "Settings",
    "StartupBindError",
]
