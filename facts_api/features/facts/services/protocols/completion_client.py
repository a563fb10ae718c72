"""Protocol for text completion services."""

from typing import Protocol


class CompletionClient(Protocol):
    """Protocol for a language-model completion endpoint.

    Implementations send one prompt and return the text of a single
    candidate, with generation cut at the first stop sequence.
    """

    async def complete(self, prompt: str, stop: list[str]) -> str:
        """Generate a completion for `prompt`.

        Args:
            prompt: The full prompt text
            stop: Sequences at which generation stops (not included in output)

        Returns:
            The generated text of the single candidate
        """
        ...
