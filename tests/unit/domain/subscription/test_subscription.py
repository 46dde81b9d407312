"""Unit tests for EventSubscription and EmitterSubscription."""

import gc

from eventsub.domain.subscription.model.emitter import EmitterSubscription
from eventsub.domain.subscription.model.subscription import (
    EventSubscription,
    RemovableSubscription,
)
from eventsub.domain.subscription.model.value import SubscriptionState
from eventsub.domain.subscription.service.registry import SubscriptionRegistry


class RecordingSubscriber:
    """Fake subscriber that records remove_subscription calls."""

    def __init__(self):
        self.removed: list[EventSubscription] = []

    def remove_subscription(self, subscription: EventSubscription) -> None:
        self.removed.append(subscription)


class TestEventSubscription:
    """Tests for the base subscription handle."""

    def test_new_subscription_is_unregistered(self) -> None:
        """A fresh handle should point at its subscriber with no type or key."""
        subscriber = RecordingSubscriber()
        sub = EventSubscription(subscriber)

        assert sub.subscriber is subscriber
        assert sub.event_type is None
        assert sub.key is None
        assert sub.state is SubscriptionState.UNREGISTERED

    def test_remove_forwards_to_subscriber_and_detaches(self) -> None:
        """remove() should call the subscriber once and clear the back-reference."""
        subscriber = RecordingSubscriber()
        sub = EventSubscription(subscriber)

        sub.remove()

        assert subscriber.removed == [sub]
        assert sub.subscriber is None
        assert sub.state is SubscriptionState.REMOVED

    def test_remove_is_idempotent(self) -> None:
        """A second remove() should not reach the subscriber again."""
        subscriber = RecordingSubscriber()
        sub = EventSubscription(subscriber)

        sub.remove()
        sub.remove()

        assert subscriber.removed == [sub]

    def test_does_not_keep_registry_alive(self) -> None:
        """The back-reference is weak; a collected registry reads as None."""
        registry = SubscriptionRegistry()
        sub = registry.add_subscription("click", EventSubscription(registry))

        del registry
        gc.collect()

        assert sub.subscriber is None
        assert sub.state is SubscriptionState.REMOVED
        sub.remove()  # no registry left, nothing to do

    def test_satisfies_removable_protocol(self) -> None:
        """Handles should be usable wherever a RemovableSubscription is expected."""
        sub = EventSubscription(RecordingSubscriber())

        assert isinstance(sub, RemovableSubscription)


class TestEmitterSubscription:
    """Tests for the listener-carrying subscription."""

    def test_stores_listener_and_context_verbatim(self) -> None:
        """Listener and context should be kept as given, without being called."""
        calls: list[str] = []

        def listener() -> None:
            calls.append("called")

        context = {"owner": "widget"}
        subscriber = RecordingSubscriber()

        sub = EmitterSubscription(subscriber, listener, context)

        assert sub.listener is listener
        assert sub.context is context
        assert sub.subscriber is subscriber
        assert calls == []

    def test_context_defaults_to_none(self) -> None:
        """Context is optional."""
        sub = EmitterSubscription(RecordingSubscriber(), print)

        assert sub.context is None

    def test_remove_behaves_like_base_handle(self) -> None:
        """EmitterSubscription should inherit idempotent removal."""
        subscriber = RecordingSubscriber()
        sub = EmitterSubscription(subscriber, print)

        sub.remove()
        sub.remove()

        assert subscriber.removed == [sub]
        assert sub.state is SubscriptionState.REMOVED
