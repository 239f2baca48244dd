"""A table mapping 64-bit hash values to integer values."""

from __future__ import annotations

from typing import Iterator, Optional

_HASH_LIMIT = 1 << 64


def _check_hash(hash_value: int) -> int:
    if not 0 <= hash_value < _HASH_LIMIT:
        raise ValueError(f"hash value {hash_value} is not an unsigned 64-bit integer")
    return hash_value


class HashTable:
    """Maps unsigned 64-bit hashes to integer values."""

    def __init__(self) -> None:
        self._items: dict[int, int] = {}

    def find(self, hash_value: int) -> Optional[int]:
        """Return the value stored for hash_value, or None if absent."""
        return self._items.get(_check_hash(hash_value))

    def add(self, hash_value: int, value: int) -> bool:
        """Store value under hash_value.

        Returns True if the hash already existed (its value is replaced),
        False if it was newly added.
        """
        key = _check_hash(hash_value)
        existed = key in self._items
        self._items[key] = value
        return existed

    def remove(self, hash_value: int) -> bool:
        """Remove hash_value; return True if it was present."""
        key = _check_hash(hash_value)
        if key in self._items:
            del self._items[key]
            return True
        return False

    def __contains__(self, hash_value: object) -> bool:
        if not isinstance(hash_value, int):
            return False
        return hash_value in self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)