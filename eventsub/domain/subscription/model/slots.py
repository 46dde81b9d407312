"""Sparse, index-addressed storage for the subscriptions of one event type."""

from typing import Generic, Iterator, TypeVar

from eventsub.domain.subscription.model.value import SlotKey

T = TypeVar("T")


class SubscriptionSlots(Generic[T]):
    """Append-only arena with stable indices.

    Appending assigns the next index, which is the current length including
    holes. Deleting an index leaves a hole (``None``) in place: later entries
    are never shifted and indices are never reused, so a key handed out at
    registration stays valid for the lifetime of the entry.

    Example:
        slots = SubscriptionSlots[str]()
        slots.append("a")   # 0
        slots.append("b")   # 1
        del slots[0]
        list(slots)         # [None, "b"]
        slots.append("c")   # 2
    """

    def __init__(self) -> None:
        self._items: list[T | None] = []

    def append(self, item: T) -> SlotKey:
        """Store item in a new slot and return its key."""
        key = SlotKey(len(self._items))
        self._items.append(item)
        return key

    def __delitem__(self, key: int) -> None:
        # Holes stay holes; unknown keys are ignored.
        if 0 <= key < len(self._items):
            self._items[key] = None

    def discard(self, key: int, item: T) -> bool:
        """Empty slot key only if it still holds item (by identity).

        Returns:
            True if the slot was emptied.
        """
        if 0 <= key < len(self._items) and self._items[key] is item:
            self._items[key] = None
            return True
        return False

    def __getitem__(self, key: int) -> T | None:
        """Return the item at key, or None for a hole.

        Raises:
            IndexError: If key was never assigned.
        """
        if not 0 <= key < len(self._items):
            raise IndexError(f"slot {key} out of range")
        return self._items[key]

    def __len__(self) -> int:
        """Number of slots ever assigned, holes included."""
        return len(self._items)

    def __iter__(self) -> Iterator[T | None]:
        return iter(self._items)

    def __contains__(self, item: object) -> bool:
        return any(existing is item for existing in self._items if existing is not None)

    def active(self) -> Iterator[tuple[SlotKey, T]]:
        """Iterate over (key, item) for live slots only, in key order."""
        for key, item in enumerate(self._items):
            if item is not None:
                yield SlotKey(key), item

    def count_active(self) -> int:
        """Number of live (non-hole) slots."""
        return sum(1 for item in self._items if item is not None)

    def __repr__(self) -> str:
        return f"SubscriptionSlots(size={len(self._items)}, active={self.count_active()})"
