from __future__ import annotations

import logging

from fastapi import status
from fastapi.responses import JSONResponse


def error_response(
    message: str,
    *,
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
    exc: BaseException | None = None,
) -> JSONResponse:
    """Build the ``{"error", "details"}`` payload used by the storefront routes."""

    content: dict[str, str] = {"error": message}
    if exc is not None:
        content["details"] = str(exc)
    return JSONResponse(status_code=status_code, content=content)


def server_error(logger: logging.Logger, message: str, exc: BaseException) -> JSONResponse:
    logger.error("%s: %s", message, exc, exc_info=exc)
    return error_response(message, exc=exc)
