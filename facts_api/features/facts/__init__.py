"""Fact extraction feature."""
