"""Standard-library logging setup.

Quorum's own code logs through logfire. Libraries (uvicorn, SQLAlchemy,
asyncpg) use ``logging``; their records are forwarded to logfire so both
end up in one place.
"""

import logging

import logfire

from quorum.config import Settings

# Library loggers that are only interesting at WARNING outside debug mode
NOISY_LOGGERS = ("sqlalchemy.engine", "asyncpg", "uvicorn.access")


def log_level(settings: Settings) -> int:
    """Root level for the configured environment."""
    if settings.debug:
        return logging.DEBUG
    if settings.environment == "production":
        return logging.WARNING
    return logging.INFO


def setup_logging(settings: Settings) -> None:
    """Route stdlib logging into logfire at an environment-appropriate level.

    Args:
        settings: Application settings
    """
    level = log_level(settings)
    logging.basicConfig(
        level=level,
        handlers=[logfire.LogfireLoggingHandler()],
        force=True,
    )

    library_level = logging.DEBUG if settings.debug else logging.WARNING
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(library_level)

    logfire.info(
        "Logging configured",
        environment=settings.environment,
        level=logging.getLevelName(level),
    )
