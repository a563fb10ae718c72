"""Facts API: fact extraction from text with a cached language-model backend."""

__version__ = "1.0.0"
