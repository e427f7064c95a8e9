"""Socket binding and server startup.

The listener is bound here, before uvicorn takes over, so that a port that
cannot be bound surfaces as :class:`StartupBindError` instead of a log line
from inside the server loop.
"""

import socket

import uvicorn
from pydantic import ValidationError

from everfit_app.platform.observability.logging import get_logger
from everfit_app.platform.server.exceptions import StartupBindError
from everfit_app.platform.settings import Settings

logger = get_logger(__name__)

APP_FACTORY = "everfit_app:app"
LISTEN_BACKLOG = 2048


def load_settings() -> Settings:
    """Read settings from the environment.

    An unparsable port is a bind failure; every other validation error
    propagates unchanged.
    """
    try:
        return Settings()
    except ValidationError as exc:
        port_errors = [err for err in exc.errors() if err["loc"] and err["loc"][-1] in ("PORT", "port")]
        if port_errors:
            raise StartupBindError(
                f"invalid port value {port_errors[0].get('input')!r}"
            ) from exc
        raise


def bind_socket(host: str, port: int, backlog: int = LISTEN_BACKLOG) -> socket.socket:
    """Create a listening TCP socket bound to ``host:port``.

    Raises:
        StartupBindError: the address is in use, privileged, or not a valid port
    """
    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    sock = socket.socket(family, socket.SOCK_STREAM)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    try:
        sock.bind((host, port))
        sock.listen(backlog)
    except (OSError, OverflowError) as exc:
        sock.close()
        raise StartupBindError(str(exc), host=host, port=port) from exc
    sock.set_inheritable(True)
    return sock


def serve(settings: Settings, reload: bool = False) -> None:
    """Bind the configured port and serve until the process is signalled.

    With ``reload`` the uvicorn reloader owns the socket, so nothing is
    pre-bound here.
    """
    host = settings.app_http.host
    port = settings.bind_port

    kwargs = {
        "factory": True,
        "loop": "uvloop",
        "host": host,
        "port": port,
        "log_level": settings.app_http.log_level.lower(),
        "log_config": None,
    }

    if reload:
        uvicorn.run(APP_FACTORY, reload=True, **kwargs)
        return

    sock = bind_socket(host, port)
    logger.info("Server is running on port %s", port)

    server = uvicorn.Server(uvicorn.Config(APP_FACTORY, **kwargs))
    server.run(sockets=[sock])
