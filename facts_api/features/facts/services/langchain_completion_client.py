"""Completion service using LangChain and OpenAI's completions endpoint."""

from langchain_core.language_models import BaseLLM
from langchain_openai import OpenAI

from facts_api.core.settings import Settings

# Generation parameters used for every fact extraction call
TEMPERATURE = 0.7
MAX_TOKENS = 512
CANDIDATES = 1

MISSING_API_KEY_MESSAGE = "OPENAI_API_KEY environment variable not set."


class LangChainCompletionClient:
    """Sends raw prompts to a completion model and returns the generated text.

    The model is created on the first completion, so a missing API key only
    fails requests that actually need the model.
    """

    def __init__(self, settings: Settings | None = None, llm: BaseLLM | None = None):
        """Initialize the client.

        Args:
            settings: Settings to read the API key and model from. Defaults to
                a fresh `Settings()` reading the current environment.
            llm: Preconfigured LangChain LLM, mainly for tests.
        """
        self.settings = settings or Settings()
        self._llm = llm

    @property
    def llm(self) -> BaseLLM:
        """The completion model, built from settings on first access.

        Raises:
            ValueError: If no LLM was given and OPENAI_API_KEY is not set.
        """
        if self._llm is None:
            if not self.settings.openai_api_key:
                raise ValueError(MISSING_API_KEY_MESSAGE)

            self._llm = OpenAI(
                model=self.settings.completion_model,
                temperature=TEMPERATURE,
                max_tokens=MAX_TOKENS,
                n=CANDIDATES,
                streaming=False,
                api_key=self.settings.openai_api_key,
                timeout=self.settings.completion_timeout_seconds,
                max_retries=0,
            )
        return self._llm

    async def complete(self, prompt: str, stop: list[str]) -> str:
        """Generate a completion for `prompt`, stopping at any of `stop`."""
        return await self.llm.ainvoke(prompt, stop=stop)
