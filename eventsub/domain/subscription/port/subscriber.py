"""Subscriber port - the registry as seen from a subscription handle."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from eventsub.domain.subscription.model.subscription import EventSubscription


class Subscriber(Protocol):
    """Anything a subscription can remove itself from.

    Handles only ever call remove_subscription(); registration and lookup
    belong to the registry's own API.
    """

    def remove_subscription(self, subscription: EventSubscription) -> None:
        """Erase the slot occupied by subscription, if any."""
        ...
