"""
HTTP health check and service metadata.
"""

import datetime
import os
import platform
import socket
import time
from typing import Literal

from pydantic import BaseModel

from everfit_app.platform.constants import HEALTHY_STATUS, SERVICE_NAME

__all__ = ["HealthStatus", "MetadataManager", "metadata"]


class HealthStatus(BaseModel):
    """Body of ``GET /health``. The status is a constant literal."""

    status: Literal["healthy"] = HEALTHY_STATUS


class MetadataManager:
    """Static process metadata served by ``GET /info``, plus start time and uptime.

    Build and image keys are read from the environment once, at import.
    """

    # keys to read from the environment
    ENV_INFO_KEYS = [
        "BUILD_DATE",
        "BUILD_URL",
        "BUILD_VERSION",
        "GIT_COMMIT",
        "GIT_COMMIT_DATE",
        "IMAGE_NAME",
        "SERVICE_ID",
        "SERVICE_NAME",
        "PYTHON_VERSION",
    ]
    HOSTNAME_KEY = "HOSTNAME"
    OS_VERSION_KEY = "OS_VERSION"

    def __init__(self):
        self._started_at = datetime.datetime.now(tz=datetime.UTC).isoformat()
        self._started_ts = time.monotonic()

        metadata = {key: os.environ.get(key) for key in self.ENV_INFO_KEYS}
        metadata[self.HOSTNAME_KEY] = socket.gethostname()
        metadata[self.OS_VERSION_KEY] = platform.platform()
        metadata["SERVICE_NAME"] = metadata["SERVICE_NAME"] or SERVICE_NAME
        self.metadata = {key.lower(): value for key, value in metadata.items()}

    def info(self):
        """
        Return metadata about the container and some basic stats
        """
        return {
            **self.metadata,
            "started": self._started_at,
            "uptime_seconds": round(time.monotonic() - self._started_ts, 3),
        }


metadata = MetadataManager()
