"""Create (or recreate) the prompts and facts tables in the configured database."""

import argparse
import asyncio
import logging
import sys

from sqlalchemy.ext.asyncio import create_async_engine

from facts_api.core.logging import configure_logging
from facts_api.core.settings import get_settings
from facts_api.db.postgres.schema import create_all_tables, drop_all_tables

logger = logging.getLogger("create_schema")


async def create_schema(drop_existing: bool) -> None:
    settings = get_settings()
    engine = create_async_engine(settings.database_url, echo=settings.debug)

    try:
        if drop_existing:
            logger.info("Dropping existing tables")
            await drop_all_tables(engine)
        await create_all_tables(engine)
        logger.info("Schema is up to date")
    finally:
        await engine.dispose()


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--drop",
        action="store_true",
        help="Drop the prompts and facts tables before creating them",
    )
    args = parser.parse_args()

    configure_logging(get_settings().log_level)
    try:
        asyncio.run(create_schema(drop_existing=args.drop))
    except Exception:
        logger.exception("Failed to create schema")
        sys.exit(1)


if __name__ == "__main__":
    main()
