"""Main LinkedMap implementation."""

import logging
from collections.abc import Hashable, Iterable, Iterator, Mapping, MutableMapping
from typing import Any, Generic, TypeVar

from linkedmap.errors import KeyNotFoundError
from linkedmap.iterators import (
    ItemIterator,
    KeyIterator,
    LinkedItemsView,
    LinkedKeysView,
    LinkedValuesView,
)
from linkedmap.linkedlist import SlotList
from linkedmap.types import MissingKeyPolicy

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

logger = logging.getLogger(__name__)

_MISSING: Any = object()


class LinkedMap(MutableMapping[K, V], Generic[K, V]):
    """
    Hash map that iterates in insertion order with O(1) operations.

    A dict maps each key to a slot handle, and the slots are threaded into a
    circular doubly-linked list. Lookup goes through the dict, iteration
    walks the list, so reusing a freed slot for a new key never moves that
    key ahead of older ones.

    Ordering rules:
        - A new key is appended at the tail.
        - Assigning to an existing key updates the value in place.
        - A removed key that is inserted again goes to the tail.

    The map is not synchronized. Callers sharing it across tasks or threads
    must guard it themselves (see GuardedLinkedMap).
    """

    def __init__(
        self,
        other: Mapping[K, V] | Iterable[tuple[K, V]] = (),
        /,
        *,
        initial_capacity: int = 8,
        **kwargs: V,
    ) -> None:
        """
        Initialize the map.

        Args:
            other: Mapping or iterable of (key, value) pairs to insert, in order
            initial_capacity: Number of entries to reserve storage for before
                the slot arena has to grow
            **kwargs: Extra entries, inserted after those from other

        Raises:
            ValueError: If initial_capacity is not positive
        """
        self._index: dict[K, int] = {}
        self._list = SlotList[K, V](initial_capacity)
        # Bumped on every structural change; iterators compare against it
        self._mutations = 0
        self.update(other, **kwargs)

    @classmethod
    def fromkeys(cls, keys: Iterable[K], value: Any = None) -> "LinkedMap[K, Any]":
        """Create a map with keys from an iterable, all mapped to value."""
        new: LinkedMap[K, Any] = cls()
        for key in keys:
            new.insert(key, value)
        return new

    def insert(self, key: K, value: V) -> None:
        """
        Insert or update a key.

        A new key is appended at the tail of the iteration order. An existing
        key keeps its position and only has its value replaced.
        """
        slot = self._index.get(key)
        if slot is not None:
            self._list.set_value(slot, value)
            return

        slot = self._list.allocate(key, value)
        self._list.append(slot)
        self._index[key] = slot
        self._mutations += 1

    def get(self, key: K, default: Any = _MISSING) -> V:
        """
        Return the value for key.

        Args:
            key: The key to look up
            default: Returned when key is absent. If omitted, absence raises.

        Raises:
            KeyNotFoundError: If key is absent and no default was given
        """
        slot = self._index.get(key)
        if slot is None:
            if default is _MISSING:
                raise KeyNotFoundError(key)
            return default
        return self._list.value_at(slot)

    def remove(self, key: K, *, if_missing: MissingKeyPolicy = "raise") -> bool:
        """
        Remove a key and release its slot.

        Args:
            key: The key to remove
            if_missing: Policy when key is absent:
                - "raise": Raise KeyNotFoundError (default)
                - "ignore": Return False

        Returns:
            True if the key was present and removed

        Raises:
            KeyNotFoundError: If key is absent and if_missing="raise"
        """
        slot = self._index.pop(key, None)
        if slot is None:
            if if_missing == "ignore":
                return False
            raise KeyNotFoundError(key)

        self._list.unlink(slot)
        self._list.release(slot)
        self._mutations += 1
        return True

    def iterate(self, *, reverse: bool = False) -> Iterator[tuple[K, V]]:
        """
        Return a fresh iterator of (key, value) pairs, oldest first.

        With reverse=True the newest entry comes first. The iterator raises
        IteratorInvalidatedError on its next advance if a key is added or
        removed after it was created.
        """
        return ItemIterator(self, reverse=reverse)

    def size(self) -> int:
        """Return the number of entries."""
        return len(self._index)

    def contains_key(self, key: K) -> bool:
        """Check if key is present."""
        return key in self._index

    def move_to_end(self, key: K, last: bool = True) -> None:
        """
        Move an existing key to the tail, or to the head if last is False.

        Raises:
            KeyNotFoundError: If key is absent
        """
        slot = self._index.get(key)
        if slot is None:
            raise KeyNotFoundError(key)
        self._list.move_to_end(slot, last)
        self._mutations += 1

    def first(self) -> tuple[K, V]:
        """Return the oldest (key, value) pair."""
        slot = self._list.first()
        if slot is None:
            raise KeyNotFoundError(None, "first(): LinkedMap is empty")
        return (self._list.key_at(slot), self._list.value_at(slot))

    def last(self) -> tuple[K, V]:
        """Return the newest (key, value) pair."""
        slot = self._list.last()
        if slot is None:
            raise KeyNotFoundError(None, "last(): LinkedMap is empty")
        return (self._list.key_at(slot), self._list.value_at(slot))

    def pop(self, key: K, default: Any = _MISSING) -> V:
        """Remove key and return its value, or default if given and key is absent."""
        slot = self._index.get(key)
        if slot is None:
            if default is _MISSING:
                raise KeyNotFoundError(key)
            return default
        value = self._list.value_at(slot)
        self.remove(key)
        return value

    def popitem(self, last: bool = True) -> tuple[K, V]:
        """Remove and return the newest (key, value) pair, or the oldest if last is False."""
        slot = self._list.pop() if last else self._list.popleft()
        if slot is None:
            raise KeyNotFoundError(None, "popitem(): LinkedMap is empty")
        key = self._list.key_at(slot)
        value = self._list.value_at(slot)
        del self._index[key]
        self._list.release(slot)
        self._mutations += 1
        return (key, value)

    def clear(self) -> None:
        """Remove every entry. Storage capacity is kept."""
        if not self._index:
            return
        count = len(self._index)
        self._index.clear()
        self._list.clear()
        self._mutations += 1
        logger.debug("Cleared %d entries", count)

    def copy(self) -> "LinkedMap[K, V]":
        """Return a shallow copy with the same order."""
        new = self.__class__(initial_capacity=max(len(self), 1))
        for key, value in self.iterate():
            new.insert(key, value)
        return new

    __copy__ = copy

    def keys(self) -> LinkedKeysView[K]:
        return LinkedKeysView(self)

    def values(self) -> LinkedValuesView[V]:
        return LinkedValuesView(self)

    def items(self) -> LinkedItemsView[K, V]:
        return LinkedItemsView(self)

    def __getitem__(self, key: K) -> V:
        return self.get(key)

    def __setitem__(self, key: K, value: V) -> None:
        self.insert(key, value)

    def __delitem__(self, key: K) -> None:
        self.remove(key)

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def __iter__(self) -> Iterator[K]:
        return KeyIterator(self)

    def __reversed__(self) -> Iterator[K]:
        return KeyIterator(self, reverse=True)

    def __len__(self) -> int:
        return len(self._index)

    def __eq__(self, other: object) -> bool:
        """Order-sensitive against another LinkedMap, content-only against other mappings."""
        if isinstance(other, LinkedMap):
            return len(self) == len(other) and list(self.iterate()) == list(other.iterate())
        if isinstance(other, Mapping):
            return dict(self.iterate()) == dict(other.items())
        return NotImplemented

    def __repr__(self) -> str:
        if not self:
            return f"{self.__class__.__name__}()"
        return f"{self.__class__.__name__}({list(self.iterate())!r})"
