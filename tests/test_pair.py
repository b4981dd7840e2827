"""
Tests for KVPair

Run with: python -m pytest tests/test_pair.py -v
"""

import pytest

from structures.mapping.pair import KVPair


class TestKVPair:
    """Test the KVPair entry type."""

    def test_fields(self):
        """Test key and value are exposed."""
        pair = KVPair("a", 1)
        assert pair.key == "a"
        assert pair.value == 1

    def test_value_is_mutable(self):
        """Test value can be replaced in place."""
        pair = KVPair("a", 1)
        pair.value = 2
        assert pair.value == 2

    def test_key_is_read_only(self):
        """Test key cannot be reassigned."""
        pair = KVPair("a", 1)
        with pytest.raises(AttributeError):
            pair.key = "b"

    def test_clone_is_independent(self):
        """Test mutating a cloned pair leaves the original untouched."""
        pair = KVPair("a", 1)
        copy = pair.clone()
        copy.value = 99

        assert copy is not pair
        assert copy.key == "a"
        assert pair.value == 1

    def test_str(self):
        """Test string rendering."""
        assert str(KVPair("a", 1)) == "a: 1"

    def test_repr(self):
        """Test repr rendering."""
        assert repr(KVPair("a", 1)) == "KVPair(key='a', value=1)"
