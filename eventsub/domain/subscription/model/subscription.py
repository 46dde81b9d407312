"""Subscription handles returned to callers on registration."""

from __future__ import annotations

import logging
import weakref
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from eventsub.domain.subscription.model.value import EventType, SlotKey, SubscriptionState

if TYPE_CHECKING:
    from eventsub.domain.subscription.port.subscriber import Subscriber

logger = logging.getLogger(__name__)


@runtime_checkable
class RemovableSubscription(Protocol):
    """Capability of a token that can unsubscribe itself."""

    def remove(self) -> None: ...


class EventSubscription:
    """A subscription to a particular event type that can remove itself.

    The handle keeps a weak back-reference to the subscriber that controls it;
    it never keeps that subscriber alive. ``event_type`` and ``key`` are
    stamped by the registry on registration and stay fixed afterwards.

    Attributes:
        event_type: Event type assigned at registration (None before).
        key: Slot key assigned at registration (None before).
    """

    def __init__(self, subscriber: Subscriber) -> None:
        self._subscriber_ref: weakref.ReferenceType[Subscriber] | None = weakref.ref(subscriber)
        self._removed = False
        self.event_type: EventType | None = None
        self.key: SlotKey | None = None

    @property
    def subscriber(self) -> Subscriber | None:
        """The controlling subscriber, or None once removed or collected."""
        if self._subscriber_ref is None:
            return None
        return self._subscriber_ref()

    @property
    def state(self) -> SubscriptionState:
        """REMOVED after remove() or once the subscriber has been collected."""
        if self._removed or self.subscriber is None:
            return SubscriptionState.REMOVED
        if self.event_type is None:
            return SubscriptionState.UNREGISTERED
        return SubscriptionState.REGISTERED

    def remove(self) -> None:
        """Remove this subscription from the subscriber that controls it.

        Idempotent: once removed, further calls do nothing.
        """
        subscriber = self.subscriber
        if subscriber is not None:
            subscriber.remove_subscription(self)
            self._subscriber_ref = None
            self._removed = True
            logger.debug("Subscription %s:%s removed", self.event_type, self.key)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(event_type={self.event_type!r}, "
            f"key={self.key!r}, state={self.state.value})"
        )
