"""
AssociativeArray Configuration Settings

This module contains the tunables for the associative array container.
Values may be overridden through environment variables.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Container configuration settings."""

    # Storage settings
    DEFAULT_CAPACITY: int = int(os.environ.get("ASSOC_ARRAY_DEFAULT_CAPACITY", "16"))
    GROWTH_FACTOR: int = int(os.environ.get("ASSOC_ARRAY_GROWTH_FACTOR", "2"))


# Global settings instance
settings = Settings()
