#!/usr/bin/env python3
"""Serve the Quorum API with uvicorn.

Logging and Logfire are configured here, before the app factory runs, so
failures while building the app or container are captured too.
"""

import sys

import logfire
import uvicorn

from quorum.config import Settings
from quorum.util.logging import setup_logging
from quorum.util.observability import configure_logfire


def main() -> int:
    settings = Settings()
    configure_logfire(settings)
    setup_logging(settings)

    try:
        logfire.info(
            "Starting Quorum API",
            host=settings.host,
            port=settings.port,
            git_sha=settings.git_sha,
        )
        uvicorn.run(
            "quorum.interface.api.app:create_app",
            factory=True,
            host=settings.host,
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )
        return 0
    except Exception as e:
        logfire.error(
            "Quorum API failed to start",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
