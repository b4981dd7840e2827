"""
Pytest Configuration and Fixtures

This module provides shared fixtures and configuration for all tests.
"""

import pytest

from structures.mapping.associative_array import AssociativeArray


# ============================================================================
# AssociativeArray Fixtures
# ============================================================================

@pytest.fixture
def array() -> AssociativeArray:
    """Create a fresh AssociativeArray with the default capacity."""
    return AssociativeArray()


@pytest.fixture
def small_array() -> AssociativeArray:
    """Create an AssociativeArray with 2 slots for growth testing."""
    return AssociativeArray(capacity=2)


@pytest.fixture
def populated_array() -> AssociativeArray:
    """Create an AssociativeArray holding a=1, b=2, c=3, d=4 in that order."""
    arr = AssociativeArray()
    for i, key in enumerate("abcd", start=1):
        arr.set(key, i)
    return arr


# ============================================================================
# Pytest Configuration
# ============================================================================

def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
