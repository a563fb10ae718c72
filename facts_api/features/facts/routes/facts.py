"""Facts lookup route handler."""

from typing import Protocol

from fastapi import APIRouter, Body, Depends, HTTPException, Query, status

from facts_api.features.facts.dtos import (
    ErrorResponse,
    GetFactsRequest,
    GetFactsResponse,
)
from facts_api.features.facts.repositories import FactRepository
from facts_api.features.facts.routes.dependencies import (
    get_fact_repository,
    upstream_error_detail,
)
from facts_api.features.facts.usecases import (
    FactsNotFoundError,
    GetFactsUseCaseImpl,
    UpstreamError,
)


class GetFactsUseCase(Protocol):
    """Protocol for the get facts use case."""

    async def execute(self, context: str | None) -> GetFactsResponse:
        """List the facts stored under a context."""
        ...


async def get_get_facts_use_case(
    repository: FactRepository = Depends(get_fact_repository),
) -> GetFactsUseCase:
    """Dependency injection for the get facts use case."""
    return GetFactsUseCaseImpl(repository=repository)


router = APIRouter()


@router.get(
    "/facts",
    response_model=GetFactsResponse,
    responses={
        404: {"model": ErrorResponse, "description": "No facts for the context"},
        500: {"model": ErrorResponse, "description": "Lookup failed"},
    },
)
async def get_facts(
    request: GetFactsRequest | None = Body(default=None),
    context: str | None = Query(
        default=None, description="Fact context, used when the body has none"
    ),
    use_case: GetFactsUseCase = Depends(get_get_facts_use_case),
) -> GetFactsResponse:
    """Get all facts extracted within a context.

    The context is read from the JSON request body, as the endpoint has
    always done; a `context` query parameter is accepted as a fallback.

    Raises:
        404: If no facts match the context
        500: If the database query fails
    """
    if request is not None and request.context is not None:
        context = request.context

    try:
        return await use_case.execute(context)
    except FactsNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except UpstreamError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=upstream_error_detail(e),
        )
