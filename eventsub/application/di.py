from dishka import Container, make_container

from eventsub.config import Config, configure_logging
from eventsub.domain.subscription.util.di.provider import RegistryProvider
from eventsub.util.di.scope import Scope


def create_container(config: Config | None = None) -> Container:
    # Pydantic Settings populates from env vars at runtime
    if config is None:
        config = Config()

    configure_logging(config.logging)

    return make_container(
        RegistryProvider(),
        context={Config: config},
        scopes=Scope,  # type: ignore[arg-type]  # Custom scope class
    )
