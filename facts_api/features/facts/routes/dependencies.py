"""Shared dependency providers for the facts routes."""

from functools import lru_cache

from facts_api.core.errors import INTERNAL_ERROR_MESSAGE
from facts_api.core.settings import get_settings
from facts_api.features.facts.repositories import FactRepository, PostgresFactRepository
from facts_api.features.facts.services import LangChainCompletionClient
from facts_api.features.facts.services.protocols import CompletionClient
from facts_api.features.facts.usecases import UpstreamError


@lru_cache
def get_completion_client() -> CompletionClient:
    """Get the process-wide completion client, created on first use."""
    return LangChainCompletionClient(settings=get_settings())


@lru_cache
def get_fact_repository() -> FactRepository:
    """Get the process-wide Postgres fact repository."""
    return PostgresFactRepository()


def upstream_error_detail(error: UpstreamError) -> str:
    """Message returned to the caller for an upstream failure."""
    if get_settings().expose_error_details:
        return str(error)
    return INTERNAL_ERROR_MESSAGE
