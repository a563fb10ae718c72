"""Repository protocols for the facts feature."""

from .fact_repository import DuplicatePromptError, FactRepository, PromptCreate

__all__ = ["DuplicatePromptError", "FactRepository", "PromptCreate"]
