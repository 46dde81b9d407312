from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

from eventsub.domain.subscription.model.subscription import EventSubscription

if TYPE_CHECKING:
    from eventsub.domain.subscription.port.subscriber import Subscriber


class EmitterSubscription(EventSubscription):
    """A subscription carrying the listener and context an emitter dispatches to.

    Neither the listener nor the context is validated or invoked here.

    Args:
        subscriber: The subscriber that controls this subscription.
        listener: Callable to invoke when the event is emitted.
        context: Optional value passed through when invoking the listener.
    """

    def __init__(
        self,
        subscriber: Subscriber,
        listener: Callable[..., Any],
        context: Any = None,
    ) -> None:
        super().__init__(subscriber)
        self._listener = listener
        self.context = context

    @property
    def listener(self) -> Callable[..., Any]:
        return self._listener
