"""Production container assembly and FastAPI hookup."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from quorum.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Assemble the container with every component's production implementation.

    ``FastapiProvider`` exposes the current ``Request`` to REQUEST-scoped
    providers, so each HTTP request gets its own session and services.
    """
    providers = [get_provider(base)() for base in PROVIDERS]
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach ``container`` to ``app`` so routes can use ``FromDishka``."""
    setup_dishka(container, app)
