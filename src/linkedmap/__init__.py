"""linkedmap - Insertion-ordered hash map with O(1) operations and stable iteration order."""

from linkedmap.core import LinkedMap
from linkedmap.errors import (
    IteratorInvalidatedError,
    KeyNotFoundError,
    LinkedMapError,
    MapClosedError,
)
from linkedmap.guarded import GuardedLinkedMap
from linkedmap.types import MissingKeyPolicy

__version__ = "0.0.1"

__all__ = [
    "LinkedMap",
    "GuardedLinkedMap",
    "LinkedMapError",
    "KeyNotFoundError",
    "IteratorInvalidatedError",
    "MapClosedError",
    "MissingKeyPolicy",
]
