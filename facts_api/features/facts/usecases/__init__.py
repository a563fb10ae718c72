"""Use cases for the facts feature."""

from .errors import (
    FactsError,
    FactsLookupError,
    FactsNotFoundError,
    GenerationError,
    InvalidContextError,
    InvalidInputError,
    InvalidTextError,
    UpstreamError,
)
from .get_facts_usecase import GetFactsUseCaseImpl
from .parse_text_usecase import ParseTextUseCaseImpl

__all__ = [
    "FactsError",
    "FactsLookupError",
    "FactsNotFoundError",
    "GenerationError",
    "GetFactsUseCaseImpl",
    "InvalidContextError",
    "InvalidInputError",
    "InvalidTextError",
    "ParseTextUseCaseImpl",
    "UpstreamError",
]
