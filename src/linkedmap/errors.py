"""Exception classes for linkedmap."""


class LinkedMapError(Exception):
    """Base exception for all linkedmap errors."""


class KeyNotFoundError(LinkedMapError, KeyError):
    """Raised when a lookup, removal or pop targets a key that is not in the map."""

    def __init__(self, key: object, message: str | None = None) -> None:
        self.key = key
        super().__init__(message if message is not None else f"Key {key!r} not found")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])


class IteratorInvalidatedError(LinkedMapError, RuntimeError):
    """Raised when the map is structurally modified while an iterator is in progress."""


class MapClosedError(LinkedMapError):
    """Raised when operations are attempted on a closed guarded map."""
