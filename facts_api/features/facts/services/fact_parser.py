"""Parsing of raw completion text into a list of facts."""

import json

from pydantic import BaseModel, ValidationError

from facts_api.features.facts.prompts import FACTS_JSON_PREFIX, FACTS_JSON_SUFFIX


class MalformedCompletionError(ValueError):
    """Raised when the completion cannot be turned into a list of facts."""


class ParsedFacts(BaseModel):
    """The JSON document reconstructed from a completion."""

    facts: list[str]


def parse_completion(completion: str) -> ParsedFacts:
    """Wrap the completion with the omitted JSON prefix/suffix and parse it.

    Args:
        completion: Raw text produced after the pre-seeded `{ "facts":[`.

    Returns:
        The parsed facts, in completion order.

    Raises:
        MalformedCompletionError: If the wrapped text is not valid JSON or
            `facts` is not a list of strings.
    """
    document = FACTS_JSON_PREFIX + completion + FACTS_JSON_SUFFIX
    try:
        payload = json.loads(document)
    except json.JSONDecodeError as e:
        raise MalformedCompletionError(
            f"Completion output is not valid JSON: {e.msg} at position {e.pos}"
        ) from e

    try:
        return ParsedFacts.model_validate(payload, strict=True)
    except ValidationError as e:
        raise MalformedCompletionError(
            "Completion output does not contain a list of fact strings"
        ) from e
