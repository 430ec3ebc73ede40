"""Test container builder with selective unmocking."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from social.persistence.repository.inmemory import InMemoryDatabase
from social.util.di import PROVIDERS, Component, get_provider, swappable_components


def build_test_container(
    unmock: set[Component] | None = None,
    database: InMemoryDatabase | None = None,
) -> AsyncContainer:
    """Build test container with selective unmocking.

    Args:
        unmock: Components to use production implementations for.
                All others use mocks if available.
        database: Store backing the in-memory repositories (a fresh one
                  when omitted); ignored when persistence is unmocked

    Returns:
        Configured test container

    Raises:
        ValueError: If unknown components are requested

    Examples:
        # Unit tests - all mocks
        container = build_test_container()

        # Seeded store shared with a TestClient
        db = InMemoryDatabase()
        container = build_test_container(database=db)
    """
    unmock = unmock or set()
    unknown = unmock - swappable_components()
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")

    providers = [
        get_provider(base, use_mock=base.__mock_component__ not in unmock)()
        for base in PROVIDERS
    ]

    context = {}
    if "persistence" not in unmock:
        context[InMemoryDatabase] = database or InMemoryDatabase()

    # FastapiProvider lets the same container back a TestClient
    return make_async_container(*providers, FastapiProvider(), context=context)
