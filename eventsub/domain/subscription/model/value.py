from enum import Enum
from typing import NewType

EventType = NewType("EventType", str)
"""Name of an event category; subscriptions are grouped by it."""

SlotKey = NewType("SlotKey", int)
"""Positional index of a subscription within its event type's slots."""


class SubscriptionState(Enum):
    """Lifecycle of a subscription handle."""

    UNREGISTERED = "unregistered"
    REGISTERED = "registered"
    REMOVED = "removed"
