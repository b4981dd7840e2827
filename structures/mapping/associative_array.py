"""
Associative Array Module

This module implements a small generic key-value container backed by a
contiguous, pre-allocated list of key/value pairs searched linearly.
"""

import logging
from typing import Generic, Iterator, List, Optional, Tuple, TypeVar

from ..config.settings import settings
from .errors import KeyNotFoundError
from .pair import KVPair

logger = logging.getLogger(__name__)

K = TypeVar("K")
V = TypeVar("V")


class AssociativeArray(Generic[K, V]):
    """
    Ordered key-value container with linear-scan lookup.

    Keys are compared by equality, so they need not be hashable. Pairs
    are kept in insertion order; removing a pair shifts the later pairs
    one slot to the left.

    Time Complexity:
    - set: O(n) scan, amortized O(1) append (capacity doubles when full)
    - get / has_key / remove: O(n)

    Internal Storage:
        _pairs is a list of length `capacity`. Only the first `_size`
        slots hold pairs; the remaining slots are None and never read.

    Not safe for concurrent use without external locking.
    """

    def __init__(self, capacity: Optional[int] = None):
        """
        Create a new, empty associative array.

        Args:
            capacity: Initial slot count (default from settings.DEFAULT_CAPACITY)

        Raises:
            ValueError: If capacity is not positive
        """
        capacity = capacity if capacity is not None else settings.DEFAULT_CAPACITY
        if capacity <= 0:
            raise ValueError("capacity must be positive")

        self._pairs: List[Optional[KVPair[K, V]]] = [None] * capacity
        self._size = 0

    # ------------------------------------------------------------------
    # Public operations
    # ------------------------------------------------------------------

    def set(self, key: K, value: V) -> None:
        """
        Associate value with key.

        If the key is already present its value is replaced in place and
        its position is kept. Otherwise a new pair is appended, growing
        the underlying storage first if every slot is in use.

        Args:
            key: The key to store
            value: The value to associate with the key
        """
        index = self._find(key)
        if index != -1:
            self._pairs[index].value = value
            return

        if self._size == len(self._pairs):
            self._expand()
        self._pairs[self._size] = KVPair(key, value)
        self._size += 1

    def get(self, key: K) -> V:
        """
        Get the value associated with key.

        Args:
            key: The key to look up

        Returns:
            The stored value

        Raises:
            KeyNotFoundError: If the key does not appear in the array
        """
        index = self._find(key)
        if index == -1:
            raise KeyNotFoundError(key)
        return self._pairs[index].value

    def has_key(self, key: K) -> bool:
        """Determine if key appears in the associative array."""
        return self._find(key) != -1

    def remove(self, key: K) -> None:
        """
        Remove the pair associated with key.

        Later pairs move one slot left so storage stays contiguous. Does
        nothing if the key is absent.

        Args:
            key: The key to remove
        """
        index = self._find(key)
        if index == -1:
            return

        for i in range(index, self._size - 1):
            self._pairs[i] = self._pairs[i + 1]
        self._size -= 1
        self._pairs[self._size] = None

    def size(self) -> int:
        """Return the number of key/value pairs."""
        return self._size

    def clone(self) -> "AssociativeArray[K, V]":
        """
        Create a copy with independent storage.

        Every pair is duplicated, so set() and remove() on the copy
        never affect this array and vice versa. Values themselves are
        not copied.

        Returns:
            A new AssociativeArray with the same pairs in the same order
        """
        copy = AssociativeArray(capacity=len(self._pairs))
        for i in range(self._size):
            copy._pairs[i] = self._pairs[i].clone()
        copy._size = self._size
        return copy

    def stringify(self) -> str:
        """Render as `{k1: v1, k2: v2}` in current order."""
        return "{" + ", ".join(str(pair) for pair in self._live_pairs()) + "}"

    @property
    def capacity(self) -> int:
        """Number of allocated slots (always >= size())."""
        return len(self._pairs)

    def keys(self) -> List[K]:
        return [pair.key for pair in self._live_pairs()]

    def values(self) -> List[V]:
        return [pair.value for pair in self._live_pairs()]

    def items(self) -> List[Tuple[K, V]]:
        return [(pair.key, pair.value) for pair in self._live_pairs()]

    # ------------------------------------------------------------------
    # Python protocols
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        return self.has_key(key)

    def __iter__(self) -> Iterator[K]:
        return iter(self.keys())

    def __copy__(self) -> "AssociativeArray[K, V]":
        return self.clone()

    def __str__(self) -> str:
        return self.stringify()

    def __repr__(self) -> str:
        body = ", ".join(f"{pair.key!r}: {pair.value!r}" for pair in self._live_pairs())
        return f"AssociativeArray({{{body}}})"

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _live_pairs(self) -> Iterator[KVPair[K, V]]:
        for i in range(self._size):
            yield self._pairs[i]

    def _expand(self) -> None:
        """Grow storage by settings.GROWTH_FACTOR."""
        old_capacity = len(self._pairs)
        new_capacity = old_capacity * max(settings.GROWTH_FACTOR, 2)
        self._pairs.extend([None] * (new_capacity - old_capacity))
        logger.debug(f"Expanded associative array: {old_capacity} -> {new_capacity}")

    def _find(self, key: K) -> int:
        """
        Find the index of the first pair whose key equals key.

        Returns:
            The index, or -1 if no pair matches
        """
        for i in range(self._size):
            if self._pairs[i].key == key:
                return i
        return -1
