"""Dependency injection wiring.

Layer by layer: config, domain services, application use cases, and the
persistence component (PostgreSQL in production, in-memory in tests).
"""

from typing import Type

from quorum.util.di.application import ProdApplicationProvider
from quorum.util.di.base import (
    Component,
    ProviderBase,
    component_names,
    get_provider,
    is_component,
)
from quorum.util.di.core import ProdConfigProvider
from quorum.util.di.domain import ProdDomainProvider
from quorum.util.di.infrastructure import PersistenceProvider, ProdPersistenceProvider

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]

__all__ = [
    "Component",
    "PROVIDERS",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdPersistenceProvider",
    "ProviderBase",
    "component_names",
    "get_provider",
    "is_component",
]
