#!/usr/bin/env python3
"""Create the database schema, with Logfire error tracking."""

import asyncio
import sys

import logfire

from quorum.config import Settings
from quorum.persistence.database import create_engine, create_schema
from quorum.util.observability import configure_logfire


async def _init(settings: Settings) -> None:
    engine = create_engine(settings)
    try:
        await create_schema(engine)
    finally:
        await engine.dispose()


def main() -> int:
    """Create missing tables and log any failure to Logfire."""
    settings = Settings()
    configure_logfire(settings)

    try:
        with logfire.span("init_db", environment=settings.environment):
            asyncio.run(_init(settings))
        logfire.info("Database schema ready")
        return 0
    except Exception as e:
        logfire.error(
            "Database schema creation failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so a deploy step fails instead of starting on a broken schema
        raise


if __name__ == "__main__":
    sys.exit(main())
