"""Parse route handler."""

from typing import Protocol

from fastapi import APIRouter, Body, Depends, HTTPException, status

from facts_api.features.facts.dtos import (
    ErrorResponse,
    ParseTextRequest,
    ParseTextResponse,
)
from facts_api.features.facts.repositories import FactRepository
from facts_api.features.facts.routes.dependencies import (
    get_completion_client,
    get_fact_repository,
    upstream_error_detail,
)
from facts_api.features.facts.services.protocols import CompletionClient
from facts_api.features.facts.usecases import (
    InvalidInputError,
    ParseTextUseCaseImpl,
    UpstreamError,
)


class ParseTextUseCase(Protocol):
    """Protocol for the parse text use case."""

    async def execute(self, request: ParseTextRequest) -> ParseTextResponse:
        """Extract (or look up) the facts of a text."""
        ...


async def get_parse_text_use_case(
    repository: FactRepository = Depends(get_fact_repository),
    completion_client: CompletionClient = Depends(get_completion_client),
) -> ParseTextUseCase:
    """Dependency injection for the parse text use case."""
    return ParseTextUseCaseImpl(
        repository=repository, completion_client=completion_client
    )


router = APIRouter()


@router.post(
    "/parse",
    response_model=ParseTextResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid text or context"},
        500: {"model": ErrorResponse, "description": "Extraction failed"},
    },
)
async def parse_text(
    request: ParseTextRequest | None = Body(default=None),
    use_case: ParseTextUseCase = Depends(get_parse_text_use_case),
) -> ParseTextResponse:
    """Parse text for facts.

    Takes a text and the context within which facts should be extracted, and
    returns the facts as a JSON list. Texts that were parsed before are
    answered from the database without calling the language model.

    Raises:
        400: If text (1-2000 chars) or context (1-256 chars) is invalid
        500: If the language model or the database fails
    """
    try:
        return await use_case.execute(request or ParseTextRequest())
    except InvalidInputError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except UpstreamError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=upstream_error_detail(e),
        )
