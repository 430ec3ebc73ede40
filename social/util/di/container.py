"""Production container."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from social.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Wire every provider to its production implementation.

    The PostgreSQL engine is created lazily on the first request that needs
    a repository and disposed when the container closes.
    """
    providers = [get_provider(base)() for base in PROVIDERS]
    # FastapiProvider exposes the current Request to REQUEST-scoped factories
    return make_async_container(*providers, FastapiProvider())
