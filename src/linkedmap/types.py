"""Type definitions for linkedmap."""

from typing import Literal, TypeAlias, TypeVar

# Generic type variables for keys and values
K = TypeVar("K")  # Key type
V = TypeVar("V")  # Value type

# Policy for remove() when the key is absent
MissingKeyPolicy: TypeAlias = Literal["raise", "ignore"]
