"""Errors raised while bringing the HTTP server up."""


class StartupBindError(Exception):
    """Raised when the listening socket cannot be bound.

    Covers a port already in use, insufficient privilege and an invalid port
    value. Always fatal: the process exits rather than retrying or falling
    back to another port.
    """

    def __init__(self, message: str, host: str | None = None, port: int | None = None):
        self.host = host
        self.port = port
        target = f" {host}:{port}" if host is not None else ""
        super().__init__(f"Cannot bind{target}: {message}")
