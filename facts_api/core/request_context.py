"""Request-scoped context.

`contextvars` carries the current request id so log records can be
attributed to a request without passing it through every call.
"""

from __future__ import annotations

import contextvars
import uuid
from time import perf_counter

request_id_var: contextvars.ContextVar[uuid.UUID | None] = contextvars.ContextVar(
    "request_id", default=None
)
request_started_at_var: contextvars.ContextVar[float | None] = contextvars.ContextVar(
    "request_started_at", default=None
)


def new_request_id() -> uuid.UUID:
    return uuid.uuid4()


def set_request_id(request_id: uuid.UUID | None) -> None:
    _ = request_id_var.set(request_id)


def get_request_id() -> uuid.UUID | None:
    return request_id_var.get()


def mark_request_start() -> float:
    started_at = perf_counter()
    _ = request_started_at_var.set(started_at)
    return started_at


def elapsed_ms(started_at: float | None) -> float | None:
    if started_at is None:
        return None
    return (perf_counter() - started_at) * 1000.0


def clear_request_context() -> None:
    _ = request_id_var.set(None)
    _ = request_started_at_var.set(None)
