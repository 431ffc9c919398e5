"""Test container builder with selective unmocking."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from quorum.util.di import (
    PROVIDERS,
    Component,
    component_names,
    get_provider,
    is_component,
)


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build a container using mocks for every component not in ``unmock``.

    The result can be used directly from tests (``await container.get(...)``)
    or handed to ``create_app`` to back HTTP requests.

    Args:
        unmock: Components to use production implementations for

    Returns:
        Configured test container

    Raises:
        ValueError: If ``unmock`` names an unknown component

    Examples:
        # Unit tests - in-memory repositories
        container = build_test_container()

        # Integration tests - real PostgreSQL
        container = build_test_container(unmock={"persistence"})
    """
    unmock = unmock or set()
    unknown = unmock - component_names(PROVIDERS)
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")

    providers = [
        get_provider(
            base,
            use_mock=is_component(base) and base.__mock_component__ not in unmock,
        )()
        for base in PROVIDERS
    ]
    return make_async_container(*providers, FastapiProvider())
