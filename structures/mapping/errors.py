"""Associative array error types."""

from typing import Any


class KeyNotFoundError(LookupError):
    """Raised by AssociativeArray.get() when the key is absent.

    Attributes:
        key: The key that was looked up.
    """

    def __init__(self, key: Any) -> None:
        self.key = key
        super().__init__(f"Key not found: {key}")
