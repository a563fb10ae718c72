"""Use case for listing the facts stored under a context."""

import logging

from facts_api.features.facts.dtos import GetFactsResponse
from facts_api.features.facts.repositories.protocols import FactRepository
from facts_api.features.facts.usecases.errors import (
    FactsLookupError,
    FactsNotFoundError,
)

logger = logging.getLogger(__name__)


class GetFactsUseCaseImpl:
    """Implementation of the get facts use case."""

    def __init__(self, repository: FactRepository):
        self.repository = repository

    async def execute(self, context: str | None) -> GetFactsResponse:
        """Return every fact row whose context equals `context`.

        An undefined context matches no facts.

        Raises:
            FactsNotFoundError: If no fact matches
            FactsLookupError: If the row store query fails
        """
        if context is None:
            raise FactsNotFoundError()

        try:
            facts = await self.repository.find_facts_by_context(context)
        except Exception as e:
            logger.exception("Fact lookup failed for context %r", context)
            raise FactsLookupError(str(e)) from e

        if not facts:
            logger.info("No facts found for context %r", context)
            raise FactsNotFoundError()

        return GetFactsResponse(facts=facts)
