"""DTOs for the facts feature."""

from .facts_dto import (
    MAX_CONTEXT_LENGTH,
    MAX_TEXT_LENGTH,
    ErrorResponse,
    FactDto,
    GetFactsRequest,
    GetFactsResponse,
    ParseTextRequest,
    ParseTextResponse,
)

__all__ = [
    "MAX_CONTEXT_LENGTH",
    "MAX_TEXT_LENGTH",
    "ErrorResponse",
    "FactDto",
    "GetFactsRequest",
    "GetFactsResponse",
    "ParseTextRequest",
    "ParseTextResponse",
]
