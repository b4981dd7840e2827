"""Configuration module for AssociativeArray."""

from .settings import Settings, settings

__all__ = ["Settings", "settings"]
