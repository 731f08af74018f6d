"""Per-request context: request id, bearer token and an access log line."""

from __future__ import annotations

import logging
import time
import uuid
from typing import Awaitable, Callable

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from storefront.core.logging import bind_request_id, reset_request_id

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


def bearer_token(authorization: str | None) -> str | None:
    """Return the token of a ``Bearer`` Authorization header, else ``None``."""

    if not authorization:
        return None
    scheme, _, credentials = authorization.partition(" ")
    if scheme.lower() != "bearer":
        return None
    return credentials.strip() or None


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Bind a request id for logging and record the caller's bearer token.

    The token is only stored on ``request.state``. It is resolved to a user by
    the auth dependencies of the routes that need one, so public routes accept
    any Authorization header the storefront frontend happens to send.
    """

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        request.state.request_id = request_id
        request.state.bearer_token = bearer_token(request.headers.get("Authorization"))

        context = bind_request_id(request_id)
        started = time.perf_counter()
        try:
            response = await call_next(request)
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.info(
                "%s %s -> %d (%.1f ms)", request.method, request.url.path, response.status_code, elapsed_ms
            )
        finally:
            reset_request_id(context)

        response.headers[REQUEST_ID_HEADER] = request_id
        return response
