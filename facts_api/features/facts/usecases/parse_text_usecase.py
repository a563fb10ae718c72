"""Use case for extracting facts from a submitted text."""

import logging

from facts_api.features.facts.dtos import (
    MAX_CONTEXT_LENGTH,
    MAX_TEXT_LENGTH,
    ParseTextRequest,
    ParseTextResponse,
)
from facts_api.features.facts.hashing import hash_text
from facts_api.features.facts.prompts import STOP_SEQUENCES, build_fact_prompt
from facts_api.features.facts.repositories.protocols import (
    DuplicatePromptError,
    FactRepository,
    PromptCreate,
)
from facts_api.features.facts.services.fact_parser import (
    MalformedCompletionError,
    parse_completion,
)
from facts_api.features.facts.services.protocols import CompletionClient
from facts_api.features.facts.usecases.errors import (
    GenerationError,
    InvalidContextError,
    InvalidTextError,
)

logger = logging.getLogger(__name__)


class ParseTextUseCaseImpl:
    """Implementation of the parse text use case."""

    def __init__(
        self,
        repository: FactRepository,
        completion_client: CompletionClient,
    ):
        """Initialize the use case with dependencies.

        Args:
            repository: Row store for prompts and facts
            completion_client: Language-model completion service
        """
        self.repository = repository
        self.completion_client = completion_client

    async def execute(self, request: ParseTextRequest) -> ParseTextResponse:
        """Return the facts of a text, extracting them on the first submission.

        Args:
            request: The text to parse and its context

        Returns:
            Response with the fact strings

        Raises:
            InvalidTextError: If text is missing, empty or over 2000 characters
            InvalidContextError: If context is missing, empty or over 256 characters
            GenerationError: If the completion call, its output or the
                persistence step fails
        """
        text, context = request.text, request.context
        if not isinstance(text, str) or not text or len(text) > MAX_TEXT_LENGTH:
            raise InvalidTextError()
        if (
            not isinstance(context, str)
            or not context
            or len(context) > MAX_CONTEXT_LENGTH
        ):
            raise InvalidContextError()

        text_hash = hash_text(text)

        cached = await self._find_cached(text_hash)
        if cached is not None:
            logger.info("Cache hit for hash %s", text_hash[:12])
            return ParseTextResponse(facts=cached)

        logger.info("Cache miss for hash %s, requesting completion", text_hash[:12])
        facts = await self._generate(text, context)

        try:
            prompt_id = await self.repository.create_prompt_with_facts(
                PromptCreate(
                    text=text,
                    context=context,
                    hash=text_hash,
                    fact_count=len(facts),
                ),
                facts,
            )
        except DuplicatePromptError:
            # Lost the race against a concurrent request with the same text
            logger.info("Prompt %s stored concurrently, reading it back", text_hash[:12])
            stored = await self._find_cached(text_hash)
            return ParseTextResponse(facts=stored if stored is not None else facts)
        except Exception as e:
            logger.exception("Failed to store facts for hash %s", text_hash[:12])
            raise GenerationError(str(e)) from e

        logger.info("Stored prompt %s with %d facts", prompt_id, len(facts))
        return ParseTextResponse(facts=facts)

    async def _find_cached(self, text_hash: str) -> list[str] | None:
        try:
            return await self.repository.find_facts_by_hash(text_hash)
        except Exception as e:
            logger.exception("Cache lookup failed for hash %s", text_hash[:12])
            raise GenerationError(str(e)) from e

    async def _generate(self, text: str, context: str) -> list[str]:
        prompt = build_fact_prompt(text=text, context=context)
        try:
            completion = await self.completion_client.complete(
                prompt, stop=STOP_SEQUENCES
            )
        except Exception as e:
            logger.exception("Completion request failed")
            raise GenerationError(str(e)) from e

        try:
            return parse_completion(completion).facts
        except MalformedCompletionError as e:
            logger.warning("Discarding malformed completion: %s", e)
            raise GenerationError(str(e)) from e
