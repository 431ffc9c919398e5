"""Logfire setup and library instrumentation.

Domain services open one span per operation and record outcomes on it:

    with logfire.span("cast_vote", voter_id=str(voter_id)):
        ...
        logfire.info("Vote recorded", vote_count=outcome.vote_count)

Rejected actions and version conflicts are logged with ``logfire.warn``;
swallowed notification failures with ``logfire.error``.
"""

from typing import Any

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from quorum.config import Settings


def should_send_to_logfire(settings: Settings) -> bool:
    """Explicit setting wins; otherwise export only when a token is set."""
    observability = settings.observability
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return observability.logfire_token is not None


def configure_logfire(settings: Settings) -> None:
    """Configure logfire once per process, before the app is built.

    Args:
        settings: Application settings
    """
    send = should_send_to_logfire(settings)
    options: dict[str, Any] = {
        "service_name": "quorum",
        "service_version": settings.git_sha,
        "environment": settings.environment,
        "send_to_logfire": send,
        "console": logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    }
    if settings.observability.logfire_token:
        options["token"] = settings.observability.logfire_token

    logfire.configure(**options)
    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request, tagging spans with method and path.

    Args:
        app: FastAPI application instance
    """

    def _request_attributes(request, attributes):
        return {
            **attributes,
            "method": getattr(request, "method", None),
            "path": request.url.path,
        }

    logfire.instrument_fastapi(app, request_attributes_mapper=_request_attributes)


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace queries, including compare-and-set updates and savepoints.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
