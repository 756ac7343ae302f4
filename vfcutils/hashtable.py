"""Fixed-size hash table with separate chaining."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any


@dataclass
class HashTableEntry:
    """A key and its value stored in a bucket."""

    key: str
    value: Any


class HashTable:
    """A hash table over string keys with a caller-supplied hash function.

    Iteration order follows bucket order, then insertion order within a bucket.
    """

    def __init__(self, size: int, hash_function: Callable[[str], int]) -> None:
        if size < 1:
            raise ValueError("hash table needs at least one bucket")
        self._hash = hash_function
        self._buckets: list[list[HashTableEntry]] = [[] for _ in range(size)]
        self._count = 0

    def _bucket(self, key: str) -> list[HashTableEntry]:
        return self._buckets[self._hash(key) % len(self._buckets)]

    def get(self, key: str | None) -> Any:
        """Return the value stored for key, or None."""
        if key is None:
            return None
        return next((e.value for e in self._bucket(key) if e.key == key), None)

    def set(self, key: str, value: Any) -> None:
        """Insert key with value, or replace the value of an existing key."""
        if key is None:
            raise ValueError("key must not be None")
        if value is None:
            raise ValueError("value must not be None")
        bucket = self._bucket(key)
        for entry in bucket:
            if entry.key == key:
                entry.value = value
                return
        bucket.append(HashTableEntry(key, value))
        self._count += 1

    def __len__(self) -> int:
        return self._count

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and any(e.key == key for e in self._bucket(key))

    def entries(self) -> list[HashTableEntry]:
        """Return every entry in bucket order."""
        return [entry for bucket in self._buckets for entry in bucket]

    def keys(self) -> list[str]:
        """Return every key in bucket order."""
        return [entry.key for entry in self.entries()]

    def values(self) -> list[Any]:
        """Return every value in bucket order."""
        return [entry.value for entry in self.entries()]

    def clear(self, free_value: Callable[[Any], None] | None = None) -> None:
        """Remove all entries, passing each value to free_value if given."""
        if free_value is not None:
            for entry in self.entries():
                free_value(entry.value)
        for bucket in self._buckets:
            bucket.clear()
        self._count = 0