"""Custom Dishka scopes for eventsub."""

from dishka import BaseScope, new_scope


class Scope(BaseScope):  # type: ignore[misc]  # BaseScope is designed to be subclassed
    """eventsub dependency injection scopes.

    - APP: Application lifetime (singletons, e.g. the subscription registry)
    """

    APP = new_scope("APP")
