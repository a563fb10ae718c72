"""Protocol for the prompt/fact row store."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from facts_api.features.facts.dtos import FactDto


@dataclass(frozen=True, slots=True)
class PromptCreate:
    text: str
    context: str
    hash: str
    fact_count: int


class DuplicatePromptError(Exception):
    """Raised when a prompt with the same hash already exists."""

    def __init__(self, text_hash: str):
        super().__init__(f"A prompt with hash {text_hash} already exists")
        self.text_hash = text_hash


class FactRepository(Protocol):
    """Protocol for persisting prompts and their extracted facts.

    Implementations must enforce one prompt per hash and write a prompt
    together with its facts atomically.
    """

    async def find_facts_by_hash(self, text_hash: str) -> list[str] | None:
        """Return the fact texts of the first prompt with `text_hash`.

        Returns:
            The fact texts in insertion order, or None if no prompt matched
        """
        ...

    async def create_prompt_with_facts(
        self, prompt: PromptCreate, facts: Sequence[str]
    ) -> int:
        """Insert a prompt and one fact per string in a single transaction.

        Returns:
            The generated prompt id

        Raises:
            DuplicatePromptError: If a prompt with the same hash exists
        """
        ...

    async def find_facts_by_context(self, context: str) -> list[FactDto]:
        """Return all fact rows whose context equals `context`, by id."""
        ...
