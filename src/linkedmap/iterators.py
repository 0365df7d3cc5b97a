"""Fail-fast iterators and views over a LinkedMap."""

from collections.abc import ItemsView, Iterator, KeysView, ValuesView
from typing import TYPE_CHECKING, Generic, TypeVar

from linkedmap.errors import IteratorInvalidatedError
from linkedmap.linkedlist import SENTINEL

if TYPE_CHECKING:
    from linkedmap.core import LinkedMap

K = TypeVar("K")
V = TypeVar("V")
T = TypeVar("T")


class _SlotWalker(Generic[K, V, T]):
    """
    Walks the slot list from one end to the other.

    The owner's modification counter is captured at creation and checked on
    every advance. Value-only updates leave the counter alone, so they never
    invalidate a walk in progress.
    """

    __slots__ = ("_owner", "_slot", "_expected", "_reverse", "_done")

    def __init__(self, owner: "LinkedMap[K, V]", *, reverse: bool = False) -> None:
        self._owner = owner
        self._slot = SENTINEL
        self._expected = owner._mutations
        self._reverse = reverse
        self._done = False

    def __iter__(self) -> "_SlotWalker[K, V, T]":
        return self

    def _advance(self) -> int:
        if self._done:
            raise StopIteration
        if self._owner._mutations != self._expected:
            raise IteratorInvalidatedError("LinkedMap changed structure during iteration")
        slots = self._owner._list
        slot = slots.prev_of(self._slot) if self._reverse else slots.next_of(self._slot)
        if slot == SENTINEL:
            self._done = True
            raise StopIteration
        self._slot = slot
        return slot

    def __next__(self) -> T:
        raise NotImplementedError


class KeyIterator(_SlotWalker[K, V, K]):
    __slots__ = ()

    def __next__(self) -> K:
        return self._owner._list.key_at(self._advance())


class ValueIterator(_SlotWalker[K, V, V]):
    __slots__ = ()

    def __next__(self) -> V:
        return self._owner._list.value_at(self._advance())


class ItemIterator(_SlotWalker[K, V, tuple[K, V]]):
    __slots__ = ()

    def __next__(self) -> tuple[K, V]:
        slot = self._advance()
        slots = self._owner._list
        return (slots.key_at(slot), slots.value_at(slot))


class LinkedKeysView(KeysView[K]):
    """Keys in list order; supports reversed()."""

    _mapping: "LinkedMap[K, object]"

    def __iter__(self) -> Iterator[K]:
        return KeyIterator(self._mapping)

    def __reversed__(self) -> Iterator[K]:
        return KeyIterator(self._mapping, reverse=True)


class LinkedValuesView(ValuesView[V]):
    """Values in list order; supports reversed()."""

    _mapping: "LinkedMap[object, V]"

    def __iter__(self) -> Iterator[V]:
        return ValueIterator(self._mapping)

    def __reversed__(self) -> Iterator[V]:
        return ValueIterator(self._mapping, reverse=True)


class LinkedItemsView(ItemsView[K, V]):
    """(key, value) pairs in list order; supports reversed()."""

    _mapping: "LinkedMap[K, V]"

    def __iter__(self) -> Iterator[tuple[K, V]]:
        return ItemIterator(self._mapping)

    def __reversed__(self) -> Iterator[tuple[K, V]]:
        return ItemIterator(self._mapping, reverse=True)
