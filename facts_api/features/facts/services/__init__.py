"""Services for the facts feature."""

from .fact_parser import MalformedCompletionError, ParsedFacts, parse_completion
from .langchain_completion_client import LangChainCompletionClient

__all__ = [
    "LangChainCompletionClient",
    "MalformedCompletionError",
    "ParsedFacts",
    "parse_completion",
]
