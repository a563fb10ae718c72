"""Service protocols for the facts feature."""

from .completion_client import CompletionClient

__all__ = ["CompletionClient"]
