#!/usr/bin/env python3
"""Create the database schema with Logfire error tracking."""

import asyncio
import sys

import logfire

from blog.config import Settings
from blog.persistence.database import create_engine, create_schema
from blog.util.logging import setup_logging
from blog.util.observability import configure_logfire


async def init_db(settings: Settings) -> None:
    """Create any missing tables, then release the engine."""
    engine = create_engine(settings)
    try:
        await create_schema(engine)
    finally:
        await engine.dispose()


def main() -> int:
    """Create the schema and log any errors to Logfire."""
    settings = Settings()

    # Configure Logfire
    configure_logfire(settings)
    setup_logging(settings)

    try:
        logfire.info("Creating database schema", environment=settings.environment)

        asyncio.run(init_db(settings))

        logfire.info("Database schema ready")
        return 0

    except Exception as e:
        logfire.error(
            "Database schema creation failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so callers do not go on with a missing schema
        raise


if __name__ == "__main__":
    sys.exit(main())
