"""eventsub - subscription registry for event emitters.

Tracks which listeners are registered for which event types and hands out
subscriptions that can remove themselves.
"""

from eventsub.domain.shared.error import (
    AlreadyRegisteredError,
    ConfigurationError,
    EventSubError,
    InvariantViolation,
    OwnershipMismatchError,
)
from eventsub.domain.subscription.model import (
    EmitterSubscription,
    EventSubscription,
    RemovableSubscription,
    SubscriptionSlots,
    SubscriptionState,
)
from eventsub.domain.subscription.service.registry import (
    SubscriptionRegistry,
    SynchronizedSubscriptionRegistry,
)

__all__ = [
    "AlreadyRegisteredError",
    "ConfigurationError",
    "EmitterSubscription",
    "EventSubError",
    "EventSubscription",
    "InvariantViolation",
    "OwnershipMismatchError",
    "RemovableSubscription",
    "SubscriptionRegistry",
    "SubscriptionSlots",
    "SubscriptionState",
    "SynchronizedSubscriptionRegistry",
]
