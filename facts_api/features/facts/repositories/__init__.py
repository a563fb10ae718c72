"""Repositories for the facts feature."""

from .postgres_fact_repository import PostgresFactRepository
from .protocols import DuplicatePromptError, FactRepository, PromptCreate

__all__ = [
    "DuplicatePromptError",
    "FactRepository",
    "PostgresFactRepository",
    "PromptCreate",
]
