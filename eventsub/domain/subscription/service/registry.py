"""Subscription registry - event type to sparse slots of subscriptions."""

import logging
import threading
from typing import TypeVar

from eventsub.domain.shared.error import AlreadyRegisteredError, OwnershipMismatchError
from eventsub.domain.subscription.model.slots import SubscriptionSlots
from eventsub.domain.subscription.model.subscription import EventSubscription
from eventsub.domain.subscription.model.value import EventType

logger = logging.getLogger(__name__)

S = TypeVar("S", bound=EventSubscription)


class SubscriptionRegistry:
    """Stores the subscriptions registered under each event type.

    Each event type maps to a SubscriptionSlots arena. A subscription's key is
    its index in that arena; removal leaves a hole, so keys of surviving
    subscriptions never change and removed keys are never reused.

    The registry is the only thing that mutates the mapping. It is not
    thread-safe; use SynchronizedSubscriptionRegistry from multiple threads.

    Example:
        registry = SubscriptionRegistry()
        sub = registry.add_subscription("click", EmitterSubscription(registry, on_click))
        ...
        sub.remove()
    """

    def __init__(self) -> None:
        self._subscriptions_for_type: dict[str, SubscriptionSlots[EventSubscription]] = {}

    def add_subscription(self, event_type: str, subscription: S) -> S:
        """Add a subscription keyed by an event type.

        Args:
            event_type: Event type to register under.
            subscription: Handle constructed against this registry.

        Returns:
            The same subscription, stamped with event_type and key.

        Raises:
            OwnershipMismatchError: If the subscription belongs to another registry.
            AlreadyRegisteredError: If the subscription was registered before.
        """
        if subscription.subscriber is not self:
            logger.warning(
                "Rejected subscription for %s: subscriber is incorrectly set", event_type
            )
            raise OwnershipMismatchError(
                "The subscriber of the subscription is incorrectly set.",
                event_type=event_type,
            )
        if subscription.event_type is not None:
            raise AlreadyRegisteredError(
                f"Subscription is already registered under "
                f"{subscription.event_type!r} at key {subscription.key}"
            )

        slots = self._subscriptions_for_type.get(event_type)
        if slots is None:
            slots = self._subscriptions_for_type[event_type] = SubscriptionSlots()
        key = slots.append(subscription)
        subscription.event_type = EventType(event_type)
        subscription.key = key

        logger.debug("Added %s subscription at key %d", event_type, key)
        return subscription

    def remove_subscription(self, subscription: EventSubscription) -> None:
        """Remove a specific subscription.

        Prefer calling ``subscription.remove()``, which also detaches the
        handle. Missing event types, already-emptied slots and slots now held
        by another subscription (after the bucket was dropped and recreated)
        are ignored.
        """
        if subscription.event_type is None or subscription.key is None:
            return
        slots = self._subscriptions_for_type.get(subscription.event_type)
        if slots is None:
            return
        if not slots.discard(subscription.key, subscription):
            return
        logger.debug(
            "Removed %s subscription at key %d", subscription.event_type, subscription.key
        )

    def remove_all_subscriptions(self, event_type: str | None = None) -> None:
        """Remove a bulk set of subscriptions.

        Args:
            event_type: Event type whose subscriptions to drop. If None, drop
                every event type.

        Handles of dropped subscriptions are not detached; calling remove()
        on them afterwards does nothing.
        """
        if event_type is None:
            logger.debug("Removing all subscriptions (%d event types)", len(self._subscriptions_for_type))
            self._subscriptions_for_type = {}
        elif self._subscriptions_for_type.pop(event_type, None) is not None:
            logger.debug("Removed all %s subscriptions", event_type)

    def get_subscriptions_for_type(
        self, event_type: str
    ) -> SubscriptionSlots[EventSubscription] | None:
        """Return the live slots registered for event_type, or None.

        The returned collection is not a copy and may contain holes; iterate
        with ``active()`` to skip them.
        """
        return self._subscriptions_for_type.get(event_type)

    def event_types(self) -> list[str]:
        """Event types that currently have a slots collection."""
        return list(self._subscriptions_for_type)


class SynchronizedSubscriptionRegistry(SubscriptionRegistry):
    """SubscriptionRegistry guarded by one re-entrant lock per instance.

    Key assignment and hole creation on the same event type race without a
    lock, so every read and write of the mapping runs under it. Slots
    returned by get_subscriptions_for_type() are still live; callers that
    iterate them while other threads register should copy under their own
    coordination.
    """

    def __init__(self) -> None:
        super().__init__()
        self._lock = threading.RLock()

    def add_subscription(self, event_type: str, subscription: S) -> S:
        with self._lock:
            return super().add_subscription(event_type, subscription)

    def remove_subscription(self, subscription: EventSubscription) -> None:
        with self._lock:
            super().remove_subscription(subscription)

    def remove_all_subscriptions(self, event_type: str | None = None) -> None:
        with self._lock:
            super().remove_all_subscriptions(event_type)

    def get_subscriptions_for_type(
        self, event_type: str
    ) -> SubscriptionSlots[EventSubscription] | None:
        with self._lock:
            return super().get_subscriptions_for_type(event_type)

    def event_types(self) -> list[str]:
        with self._lock:
            return super().event_types()
