"""DI provider for the subscription domain."""

import logging

from dishka import Provider, from_context, provide

from eventsub.config import Config, RegistryConfig
from eventsub.domain.shared.error import ConfigurationError
from eventsub.domain.subscription.service.registry import (
    SubscriptionRegistry,
    SynchronizedSubscriptionRegistry,
)
from eventsub.util.di.scope import Scope

logger = logging.getLogger(__name__)

REGISTRY_KINDS: dict[str, type[SubscriptionRegistry]] = {
    "simple": SubscriptionRegistry,
    "synchronized": SynchronizedSubscriptionRegistry,
}


def create_registry(config: RegistryConfig) -> SubscriptionRegistry:
    """Build the registry implementation named by config.kind.

    Raises:
        ConfigurationError: If config.kind is not a known registry kind.
    """
    registry_type = REGISTRY_KINDS.get(config.kind)
    if registry_type is None:
        raise ConfigurationError(
            f"Unknown registry kind {config.kind!r}; expected one of {sorted(REGISTRY_KINDS)}"
        )
    logger.info("Creating %s subscription registry", config.kind)
    return registry_type()


class RegistryProvider(Provider):
    """Provides the APP-scoped subscription registry."""

    config = from_context(provides=Config, scope=Scope.APP)

    @provide(scope=Scope.APP)
    def get_registry(self, config: Config) -> SubscriptionRegistry:
        return create_registry(config.registry)
