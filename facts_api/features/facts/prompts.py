"""Completion prompt for fact extraction.

The prompt ends with the opening of the JSON document so the model only
produces the list items; the stop sequences cut generation at the closing
bracket and the parser puts prefix and suffix back.
"""

from langchain_core.prompts import PromptTemplate

FACTS_JSON_PREFIX = '{ "facts": ['
FACTS_JSON_SUFFIX = "]}"

STOP_SEQUENCES: list[str] = ["]}", "]\n}"]

FACT_EXTRACTION_PROMPT = PromptTemplate.from_template(
    "In the context of {context}, please extract in JSON format (list) the facts "
    "(short and concise) from the following text:\n"
    "{text}\n"
    '{{ "facts":[',
)


def build_fact_prompt(text: str, context: str) -> str:
    """Render the fact extraction prompt for one submission."""
    return FACT_EXTRACTION_PROMPT.format(text=text, context=context)
