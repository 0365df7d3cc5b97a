"""Doubly-linked list threaded through an index-based slot arena."""

import logging
from typing import Generic, TypeVar

K = TypeVar("K")
V = TypeVar("V")

logger = logging.getLogger(__name__)

# Slot 0 is the circular sentinel: _next[0] is the head, _prev[0] the tail.
SENTINEL = 0


class SlotList(Generic[K, V]):
    """
    Circular doubly-linked list whose nodes live in parallel arrays.

    Links are plain integer slot handles, so the arena owns every entry and
    neither the list nor an outside index holds a reference cycle. Freed
    slots go on a free list and are reused by later allocations; reuse never
    changes the order of linked slots.
    """

    __slots__ = ("_keys", "_values", "_prev", "_next", "_free", "_size")

    def __init__(self, initial_capacity: int = 8) -> None:
        if initial_capacity <= 0:
            raise ValueError("initial_capacity must be positive")
        # One extra slot for the sentinel
        capacity = initial_capacity + 1
        self._keys: list[K | None] = [None] * capacity
        self._values: list[V | None] = [None] * capacity
        self._prev: list[int] = [SENTINEL] * capacity
        self._next: list[int] = [SENTINEL] * capacity
        # Pop from the end, so lower slots are handed out first
        self._free: list[int] = list(range(capacity - 1, SENTINEL, -1))
        self._size = 0

    @property
    def capacity(self) -> int:
        """Number of slots backed by storage, sentinel included."""
        return len(self._keys)

    def _grow(self) -> None:
        """Double the backing storage. Amortized O(1) per allocation."""
        old = len(self._keys)
        new = old * 2
        extra = new - old
        self._keys.extend([None] * extra)
        self._values.extend([None] * extra)
        self._prev.extend([SENTINEL] * extra)
        self._next.extend([SENTINEL] * extra)
        self._free.extend(range(new - 1, old - 1, -1))
        logger.debug("Grew slot arena from %d to %d slots", old, new)

    def allocate(self, key: K, value: V) -> int:
        """Store a key/value pair in a free slot and return its handle. The slot is not linked."""
        if not self._free:
            self._grow()
        slot = self._free.pop()
        self._keys[slot] = key
        self._values[slot] = value
        return slot

    def release(self, slot: int) -> None:
        """Drop the slot's payload and return it to the free list."""
        self._keys[slot] = None
        self._values[slot] = None
        self._free.append(slot)

    def append(self, slot: int) -> None:
        """Link slot at the tail (before the sentinel). O(1)."""
        tail = self._prev[SENTINEL]
        self._prev[slot] = tail
        self._next[slot] = SENTINEL
        self._next[tail] = slot
        self._prev[SENTINEL] = slot
        self._size += 1

    def appendleft(self, slot: int) -> None:
        """Link slot at the head (after the sentinel). O(1)."""
        head = self._next[SENTINEL]
        self._prev[slot] = SENTINEL
        self._next[slot] = head
        self._prev[head] = slot
        self._next[SENTINEL] = slot
        self._size += 1

    def unlink(self, slot: int) -> None:
        """Splice slot out of the list. O(1)."""
        prev = self._prev[slot]
        nxt = self._next[slot]
        self._next[prev] = nxt
        self._prev[nxt] = prev
        self._prev[slot] = SENTINEL
        self._next[slot] = SENTINEL
        self._size -= 1

    def move_to_end(self, slot: int, last: bool = True) -> None:
        """Relink an already linked slot at the tail, or the head if last is False."""
        self.unlink(slot)
        if last:
            self.append(slot)
        else:
            self.appendleft(slot)

    def popleft(self) -> int | None:
        """Unlink and return the head slot."""
        slot = self._next[SENTINEL]
        if slot == SENTINEL:
            return None
        self.unlink(slot)
        return slot

    def pop(self) -> int | None:
        """Unlink and return the tail slot."""
        slot = self._prev[SENTINEL]
        if slot == SENTINEL:
            return None
        self.unlink(slot)
        return slot

    def first(self) -> int | None:
        slot = self._next[SENTINEL]
        return None if slot == SENTINEL else slot

    def last(self) -> int | None:
        slot = self._prev[SENTINEL]
        return None if slot == SENTINEL else slot

    def next_of(self, slot: int) -> int:
        return self._next[slot]

    def prev_of(self, slot: int) -> int:
        return self._prev[slot]

    def key_at(self, slot: int) -> K:
        return self._keys[slot]  # type: ignore[return-value]

    def value_at(self, slot: int) -> V:
        return self._values[slot]  # type: ignore[return-value]

    def set_value(self, slot: int, value: V) -> None:
        self._values[slot] = value

    def clear(self) -> None:
        """Unlink and release every slot, keeping the current capacity."""
        capacity = len(self._keys)
        self._keys = [None] * capacity
        self._values = [None] * capacity
        self._prev = [SENTINEL] * capacity
        self._next = [SENTINEL] * capacity
        self._free = list(range(capacity - 1, SENTINEL, -1))
        self._size = 0

    def __len__(self) -> int:
        """Return the number of linked slots."""
        return self._size

    def __bool__(self) -> bool:
        """Return True if the list is non-empty."""
        return self._size > 0
