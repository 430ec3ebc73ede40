"""Dependency injection wiring.

Config, domain services and use cases always use their production
providers. Persistence is swappable so tests can run against the in-memory
repositories.
"""

from social.util.di.application import ProdApplicationProvider
from social.util.di.base import Component, ProviderBase
from social.util.di.core import ProdConfigProvider
from social.util.di.domain import ProdDomainProvider
from social.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
)

PROVIDERS: list[type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]


def get_provider(
    base: type[ProviderBase], use_mock: bool = False
) -> type[ProviderBase]:
    """Resolve a PROVIDERS entry to the class to instantiate.

    Raises:
        ValueError: If a swappable component lacks the requested implementation
    """
    if not base.is_swappable():
        return base
    return base.implementation(use_mock)


def swappable_components() -> set[Component]:
    """Names of every component that has a mock implementation to swap in."""
    return {
        base.__mock_component__
        for base in PROVIDERS
        if base.is_swappable() and base.__mock_component__ is not None
    }


__all__ = [
    "Component",
    "PROVIDERS",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdPersistenceProvider",
    "ProviderBase",
    "get_provider",
    "swappable_components",
]
