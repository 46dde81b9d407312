"""Subscription domain models."""

from .emitter import EmitterSubscription
from .slots import SubscriptionSlots
from .subscription import EventSubscription, RemovableSubscription
from .value import EventType, SlotKey, SubscriptionState

__all__ = [
    "EmitterSubscription",
    "EventSubscription",
    "EventType",
    "RemovableSubscription",
    "SlotKey",
    "SubscriptionSlots",
    "SubscriptionState",
]
