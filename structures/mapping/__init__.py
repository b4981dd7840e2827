"""Mapping module for AssociativeArray."""

from .associative_array import AssociativeArray
from .errors import KeyNotFoundError
from .pair import KVPair

__all__ = ["AssociativeArray", "KVPair", "KeyNotFoundError"]
