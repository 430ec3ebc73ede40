"""Configuration providers."""

from dishka import Scope, provide

from social.config import AuthSettings, CommentSettings, Settings
from social.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Loads Settings once per container and hands out its sections.

    Services depend on the narrowest section they need, so tests and
    callers never have to build a full Settings to construct one.
    """

    @provide(scope=Scope.APP)
    def settings(self) -> Settings:
        return Settings()

    @provide(scope=Scope.APP)
    def auth(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide(scope=Scope.APP)
    def comments(self, settings: Settings) -> CommentSettings:
        return settings.comments
