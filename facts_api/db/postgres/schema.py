"""Creation and removal of the row store tables."""

from sqlalchemy.ext.asyncio import AsyncEngine

from facts_api.db.postgres.session import Base

# Import all models to ensure they are registered with Base.metadata
from facts_api.features.facts import models  # noqa: F401


async def create_all_tables(engine: AsyncEngine) -> None:
    """Create the prompts and facts tables (and their indexes) if missing."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def drop_all_tables(engine: AsyncEngine) -> None:
    """Drop the prompts and facts tables."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
