"""Postgres repository for prompts and facts."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from contextlib import AbstractAsyncContextManager

from sqlalchemy import insert, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from facts_api.db.postgres.session import get_db_session
from facts_api.features.facts.dtos import FactDto
from facts_api.features.facts.models import Fact, Prompt
from facts_api.features.facts.repositories.protocols import (
    DuplicatePromptError,
    PromptCreate,
)

logger = logging.getLogger(__name__)


class PostgresFactRepository:
    def __init__(
        self,
        *,
        get_session: Callable[
            [], AbstractAsyncContextManager[AsyncSession]
        ] = get_db_session,
    ) -> None:
        self._get_session: Callable[[], AbstractAsyncContextManager[AsyncSession]] = (
            get_session
        )

    async def find_facts_by_hash(self, text_hash: str) -> list[str] | None:
        async with self._get_session() as session:
            prompt_id = (
                await session.execute(
                    select(Prompt.id)
                    .where(Prompt.hash == text_hash)
                    .order_by(Prompt.id)
                    .limit(1)
                )
            ).scalar_one_or_none()

            if prompt_id is None:
                return None

            result = await session.execute(
                select(Fact.text).where(Fact.prompt_id == prompt_id).order_by(Fact.id)
            )
            return list(result.scalars().all())

    async def create_prompt_with_facts(
        self, prompt: PromptCreate, facts: Sequence[str]
    ) -> int:
        """Insert the prompt, then its facts, committing only if both succeed."""
        async with self._get_session() as session:
            async with session.begin():
                row = Prompt(
                    text=prompt.text,
                    context=prompt.context,
                    hash=prompt.hash,
                    fact_count=prompt.fact_count,
                )
                session.add(row)
                try:
                    await session.flush()
                except IntegrityError as e:
                    # Unique index on hash: another request stored this text first.
                    raise DuplicatePromptError(prompt.hash) from e

                if facts:
                    await session.execute(
                        insert(Fact),
                        [
                            {"text": fact, "context": prompt.context, "prompt_id": row.id}
                            for fact in facts
                        ],
                    )

                prompt_id = row.id

        logger.debug("Stored prompt %s with %d facts", prompt_id, len(facts))
        return prompt_id

    async def find_facts_by_context(self, context: str) -> list[FactDto]:
        async with self._get_session() as session:
            result = await session.execute(
                select(Fact).where(Fact.context == context).order_by(Fact.id)
            )
            return [FactDto.model_validate(fact) for fact in result.scalars().all()]
