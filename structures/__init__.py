"""
structures: Associative Array

A generic key-value container with linear-scan lookup, insertion
order, in-place update, compacting removal and cloning.
"""

from .config.settings import Settings, settings
from .mapping import AssociativeArray, KVPair, KeyNotFoundError

__version__ = "1.0.0"

__all__ = [
    "AssociativeArray",
    "KVPair",
    "KeyNotFoundError",
    "Settings",
    "settings",
]
