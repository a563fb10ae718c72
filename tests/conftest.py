"""Pytest configuration and shared fixtures for all tests.

This module provides:
- In-memory test doubles for the row store and the completion service
- A FastAPI app wired to those doubles, plus an httpx client for it
"""

from collections.abc import AsyncGenerator, Sequence
from datetime import datetime, timezone

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from facts_api.core.errors import register_exception_handlers
from facts_api.core.settings import get_settings
from facts_api.features.facts.dtos import FactDto
from facts_api.features.facts.repositories.protocols import (
    DuplicatePromptError,
    PromptCreate,
)
from facts_api.features.facts.router import router
from facts_api.features.facts.routes.dependencies import (
    get_completion_client,
    get_fact_repository,
)


class InMemoryFactRepository:
    """FactRepository double that keeps rows in lists and records every write."""

    def __init__(self) -> None:
        self.prompts: list[dict] = []
        self.facts: list[FactDto] = []
        self.prompt_inserts: list[PromptCreate] = []
        self.fact_inserts: list[dict] = []
        self.lookup_error: Exception | None = None
        self.create_error: Exception | None = None

    def add_prompt(self, prompt: PromptCreate, facts: Sequence[str]) -> int:
        prompt_id = len(self.prompts) + 1
        self.prompts.append({"id": prompt_id, "hash": prompt.hash})
        now = datetime.now(timezone.utc)
        for text in facts:
            self.facts.append(
                FactDto(
                    id=len(self.facts) + 1,
                    text=text,
                    context=prompt.context,
                    prompt_id=prompt_id,
                    inserted_at=now,
                    updated_at=now,
                )
            )
        return prompt_id

    async def find_facts_by_hash(self, text_hash: str) -> list[str] | None:
        if self.lookup_error is not None:
            raise self.lookup_error
        for prompt in self.prompts:
            if prompt["hash"] == text_hash:
                return [f.text for f in self.facts if f.prompt_id == prompt["id"]]
        return None

    async def create_prompt_with_facts(
        self, prompt: PromptCreate, facts: Sequence[str]
    ) -> int:
        if self.create_error is not None:
            raise self.create_error
        if any(p["hash"] == prompt.hash for p in self.prompts):
            raise DuplicatePromptError(prompt.hash)

        self.prompt_inserts.append(prompt)
        prompt_id = self.add_prompt(prompt, facts)
        self.fact_inserts.extend(
            {"text": text, "context": prompt.context, "prompt_id": prompt_id}
            for text in facts
        )
        return prompt_id

    async def find_facts_by_context(self, context: str) -> list[FactDto]:
        if self.lookup_error is not None:
            raise self.lookup_error
        return [f for f in self.facts if f.context == context]


class StubCompletionClient:
    """CompletionClient double returning a canned completion."""

    def __init__(self, completion: str = '"fact one", "fact two"') -> None:
        self.completion = completion
        self.error: Exception | None = None
        self.calls: list[tuple[str, list[str]]] = []

    async def complete(self, prompt: str, stop: list[str]) -> str:
        self.calls.append((prompt, stop))
        if self.error is not None:
            raise self.error
        return self.completion


@pytest.fixture
def fact_repository() -> InMemoryFactRepository:
    """Empty in-memory row store."""
    return InMemoryFactRepository()


@pytest.fixture
def completion_client() -> StubCompletionClient:
    """Completion stub producing two facts."""
    return StubCompletionClient()


@pytest.fixture
def settings_env(monkeypatch: pytest.MonkeyPatch):
    """Set environment variables for settings and reload them.

    Usage: ``settings_env(EXPOSE_ERROR_DETAILS="false")``.
    """

    def apply(**values: str) -> None:
        for key, value in values.items():
            monkeypatch.setenv(key, value)
        get_settings.cache_clear()

    yield apply
    get_settings.cache_clear()


@pytest.fixture
def app(
    fact_repository: InMemoryFactRepository,
    completion_client: StubCompletionClient,
) -> FastAPI:
    """Create a test FastAPI app with the facts router and test doubles."""
    app = FastAPI()
    register_exception_handlers(app)
    app.include_router(router)

    app.dependency_overrides[get_fact_repository] = lambda: fact_repository
    app.dependency_overrides[get_completion_client] = lambda: completion_client

    return app


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client bound to the test app."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
