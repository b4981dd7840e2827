"""Key/value pair stored by AssociativeArray."""

from typing import Generic, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class KVPair(Generic[K, V]):
    """
    A single key/value entry.

    The key is fixed once the pair is created; the value may be
    replaced in place.
    """

    __slots__ = ("_key", "value")

    def __init__(self, key: K, value: V):
        self._key = key
        self.value = value

    @property
    def key(self) -> K:
        return self._key

    def clone(self) -> "KVPair[K, V]":
        """Return a new pair holding the same key and value."""
        return KVPair(self._key, self.value)

    def __str__(self) -> str:
        return f"{self._key}: {self.value}"

    def __repr__(self) -> str:
        return f"KVPair(key={self._key!r}, value={self.value!r})"
