"""Async wrapper that serializes access to a LinkedMap behind one lock."""

import asyncio
import logging
from collections.abc import AsyncIterator, Hashable
from contextlib import asynccontextmanager
from typing import Generic, TypeVar

from linkedmap.core import LinkedMap
from linkedmap.errors import MapClosedError
from linkedmap.types import MissingKeyPolicy

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

logger = logging.getLogger(__name__)


class GuardedLinkedMap(Generic[K, V]):
    """
    LinkedMap shared between asyncio tasks.

    Every operation takes a single exclusive asyncio.Lock, so the hash index
    and the linked list are never observed mid-update. Iteration is exposed
    as snapshot() rather than a live iterator, which would otherwise be held
    across awaits and invalidated by other tasks.
    """

    def __init__(self, inner: LinkedMap[K, V] | None = None) -> None:
        """
        Initialize the guard.

        Args:
            inner: Map to guard. A new empty LinkedMap is created if omitted.
                The caller must not touch it directly afterwards.
        """
        self._lock = asyncio.Lock()
        self._map: LinkedMap[K, V] = inner if inner is not None else LinkedMap()
        self._closed = False

    async def close(self) -> None:
        """Refuse further operations. The entries are kept."""
        async with self._lock:
            if self._closed:
                return
            self._closed = True
            logger.debug("Closed guarded map holding %d entries", len(self._map))

    async def __aenter__(self) -> "GuardedLinkedMap[K, V]":
        """Context manager entry."""
        return self

    async def __aexit__(self, *args: object) -> None:
        """Context manager exit."""
        await self.close()

    def _check_open(self, action: str) -> None:
        if self._closed:
            raise MapClosedError(f"Cannot {action} a closed map")

    @asynccontextmanager
    async def locked(self) -> AsyncIterator[LinkedMap[K, V]]:
        """
        Hold the lock and yield the inner map for a multi-step update.

        Raises:
            MapClosedError: If the map is closed
        """
        async with self._lock:
            self._check_open("lock")
            yield self._map

    async def put(self, key: K, value: V) -> None:
        """Insert or update a key. See LinkedMap.insert()."""
        async with self._lock:
            self._check_open("put to")
            self._map.insert(key, value)

    async def get(self, key: K) -> V:
        """
        Return the value for key.

        Raises:
            KeyNotFoundError: If key is absent
            MapClosedError: If the map is closed
        """
        async with self._lock:
            self._check_open("get from")
            return self._map.get(key)

    async def remove(self, key: K, *, if_missing: MissingKeyPolicy = "raise") -> bool:
        """Remove a key. See LinkedMap.remove()."""
        async with self._lock:
            self._check_open("remove from")
            return self._map.remove(key, if_missing=if_missing)

    async def move_to_end(self, key: K, last: bool = True) -> None:
        async with self._lock:
            self._check_open("reorder")
            self._map.move_to_end(key, last)

    async def contains(self, key: K) -> bool:
        """Check if key is present."""
        async with self._lock:
            self._check_open("query")
            return self._map.contains_key(key)

    async def size(self) -> int:
        """Return the number of entries."""
        async with self._lock:
            self._check_open("query")
            return self._map.size()

    async def snapshot(self, *, reverse: bool = False) -> list[tuple[K, V]]:
        """Return the (key, value) pairs in iteration order, copied under the lock."""
        async with self._lock:
            self._check_open("snapshot")
            return list(self._map.iterate(reverse=reverse))

    async def clear(self) -> None:
        async with self._lock:
            self._check_open("clear")
            self._map.clear()
