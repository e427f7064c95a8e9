"""Bugsnag error reporting integration.

Unhandled exceptions and ERROR-level log entries (a failed port bind, for
instance) are forwarded to Bugsnag outside local development.
"""

import logging

import bugsnag
from bugsnag.handlers import BugsnagHandler


def initialize_bugsnag(api_key: str, release_stage: str) -> None:
    """Initialize Bugsnag error reporting.

    Configures Bugsnag with the provided API key and attaches a handler
    to the root logger to automatically report ERROR-level log entries.

    Args:
        api_key: Bugsnag project API key
        release_stage: Environment identifier ("production", "development" or "local")

    Note:
        No-op when release_stage is "local" to avoid reporting during local development.
    """
    if release_stage == "local":
        return
    logger = logging.getLogger()
    if any(isinstance(h, BugsnagHandler) for h in logger.handlers):
        return
    bugsnag.configure(
        api_key=api_key,
        release_stage=release_stage,
        auto_notify=True,
    )
    handler = BugsnagHandler()
    handler.setLevel(logging.ERROR)
    logger.addHandler(handler)
