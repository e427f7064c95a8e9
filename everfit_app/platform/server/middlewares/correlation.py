"""Middleware for request correlation ID propagation."""

import re
import uuid

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from everfit_app.platform.observability.logging import correlation_id_ctx

REQUEST_ID_HEADER = "X-Request-ID"

# Incoming ids are copied into every log line
_VALID_REQUEST_ID = re.compile(r"[A-Za-z0-9._:-]{1,128}")


def resolve_correlation_id(incoming: str | None) -> str:
    """Return the caller's request id if it is well formed, else a fresh UUID4."""
    if incoming and _VALID_REQUEST_ID.fullmatch(incoming):
        return incoming
    return str(uuid.uuid4())


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Middleware that extracts or generates correlation IDs for request tracing.

    Takes X-Request-ID from the incoming request, or generates a new UUID when it
    is missing or malformed. The id is stored in a context variable for the
    structured logging processors and echoed back in the response headers.
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        correlation_id = resolve_correlation_id(request.headers.get(REQUEST_ID_HEADER))
        token = correlation_id_ctx.set(correlation_id)

        try:
            response = await call_next(request)
            response.headers[REQUEST_ID_HEADER] = correlation_id
            return response
        finally:
            correlation_id_ctx.reset(token)
