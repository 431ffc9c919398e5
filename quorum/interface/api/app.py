"""FastAPI application factory."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from quorum.config import Settings
from quorum.interface.api.routes import answers, health, notifications, votes
from quorum.util.di.container import create_container, setup_di
from quorum.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Build the API.

    Logfire must already be configured: scripts/start_app.py does it in
    production and tests/conftest.py in tests.

    Args:
        container: DI container serving requests; the production container
            when omitted. Tests pass one built by ``build_test_container``.

    Returns:
        Configured FastAPI application
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Quorum API",
        description="Voting, answer acceptance and notifications for a Q&A community",
        version="0.1.0",
        debug=settings.debug,
    )
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin"],
        max_age=600,
    )

    setup_di(app_instance, container or create_container())

    for module in (health, votes, answers, notifications):
        app_instance.include_router(module.router)

    return app_instance
