"""Entry point when the package is executed as a module."""

import sys

import click
from pydantic import ValidationError

from .platform.observability.errors import initialize_bugsnag
from .platform.observability.logging import configure_logging, get_logger
from .platform.server.bootstrap import load_settings, serve
from .platform.server.exceptions import StartupBindError

logger = get_logger(__name__)


@click.command()
@click.option("--reload", is_flag=True)
def main(reload=False):
    try:
        settings = load_settings()
    except (StartupBindError, ValidationError) as exc:
        raise click.ClickException(str(exc)) from exc

    configure_logging(settings.app_http.log_level, json_output=settings.json_logs)
    initialize_bugsnag(settings.bugsnag.api_key, settings.bugsnag.release_stage)

    try:
        serve(settings, reload=reload)
    except StartupBindError as exc:
        logger.error("startup failed: %s", exc)
        raise click.ClickException(str(exc)) from exc


if __name__ == "__main__":
    sys.exit(main())
