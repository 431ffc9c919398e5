"""Configuration providers."""

from dishka import Scope, provide

from quorum.config import InteractionSettings, ReputationSettings, Settings
from quorum.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Settings and the sections other providers depend on directly.

    Exposing sections separately keeps domain providers from reaching into
    the whole Settings object.
    """

    scope = Scope.APP

    @provide
    def settings(self) -> Settings:
        return Settings()

    @provide
    def reputation_settings(self, settings: Settings) -> ReputationSettings:
        return settings.reputation

    @provide
    def interaction_settings(self, settings: Settings) -> InteractionSettings:
        return settings.interaction
