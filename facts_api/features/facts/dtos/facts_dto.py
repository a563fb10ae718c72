"""DTOs for the facts endpoints."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

MAX_TEXT_LENGTH = 2000
MAX_CONTEXT_LENGTH = 256

# =============================================================================
# Parse Endpoint DTOs
# =============================================================================


class ParseTextRequest(BaseModel):
    """Body of POST /parse.

    The fields accept any JSON value so that missing or mistyped values reach
    the use case, which checks text before context and answers with the
    endpoint's own error messages.
    """

    text: Any = Field(
        default=None,
        description="The text to be parsed for facts (1-2000 characters)",
        examples=["John McCrae wrote the web serial Worm."],
    )
    context: Any = Field(
        default=None,
        description="The context within which the facts should be extracted (1-256 characters)",
        examples=["Worm"],
    )


class ParseTextResponse(BaseModel):
    """Response for POST /parse, on both cache hits and fresh extractions."""

    facts: list[str]


# =============================================================================
# Facts Endpoint DTOs
# =============================================================================


class GetFactsRequest(BaseModel):
    """Body of GET /facts."""

    context: str | None = Field(
        default=None, description="Fact context to retrieve facts for"
    )


class FactDto(BaseModel):
    """A persisted fact row."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    text: str
    context: str
    prompt_id: int
    inserted_at: datetime
    updated_at: datetime


class GetFactsResponse(BaseModel):
    """Response for GET /facts."""

    facts: list[FactDto]


# =============================================================================
# Errors
# =============================================================================


class ErrorResponse(BaseModel):
    """Error body returned by every facts endpoint."""

    error: str
