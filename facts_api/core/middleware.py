"""Application middleware."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable

from fastapi import Request, Response, status

from facts_api.core.errors import INTERNAL_ERROR_MESSAGE, error_response
from facts_api.core.request_context import (
    clear_request_context,
    elapsed_ms,
    mark_request_start,
    new_request_id,
    set_request_id,
)

logger = logging.getLogger(__name__)


async def request_context_middleware(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """Attach a request id to contextvars and log the request outcome.

    Also adds `X-Request-Id` to the response. Exceptions that escape the
    route handlers are rendered here as a 500 `{"error": ...}` body, so those
    responses carry the request id too.
    """
    clear_request_context()

    request_id = new_request_id()
    set_request_id(request_id)
    started_at = mark_request_start()

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    try:
        try:
            response = await call_next(request)
        except Exception:
            logger.exception("Unhandled error on %s %s", request.method, request.url.path)
            response = error_response(
                status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE
            )
        status_code = response.status_code
        response.headers["X-Request-Id"] = str(request_id)
        return response
    finally:
        duration = elapsed_ms(started_at)
        logger.info(
            "%s %s -> %d (%.1f ms)",
            request.method,
            request.url.path,
            status_code,
            duration or 0.0,
        )
        # Always clean up to avoid context leaking across requests.
        clear_request_context()
