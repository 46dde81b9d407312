from eventsub.domain.subscription.util.di.provider import RegistryProvider, create_registry

__all__ = ["RegistryProvider", "create_registry"]
