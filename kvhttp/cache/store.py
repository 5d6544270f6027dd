"""
Key-Value Store Module

This module implements the core key-value storage functionality.

All reads and writes of the internal mapping happen while holding a
single lock, so a store instance can be shared by any number of
threads (for example FastAPI's worker thread pool).
"""

import threading
from typing import Any, Dict, Generic, List

from .base import K, V
from .exceptions import KeyNotFoundError


class KVStore(Generic[K, V]):
    """
    Thread-safe in-memory key-value store.

    This class provides O(1) average-case time complexity for:
    - get: Retrieve a value by key
    - put: Insert or replace a key-value pair
    - update: Replace the value of an existing key
    - delete: Remove a key-value pair and return its value

    Every operation is linearizable: it takes effect atomically at the
    point where it holds the lock. ``update`` performs its existence
    check and its write inside the same critical section, so a racing
    ``delete`` can never be overwritten by a phantom entry.

    Usage:
        store: KVStore[str, str] = KVStore()
        store.put("foo", "bar")
        store.get("foo")     # "bar"
        store.delete("foo")  # "bar"
        store.get("foo")     # raises KeyNotFoundError
    """

    def __init__(self):
        """Initialize an empty store."""
        self._data: Dict[K, V] = {}
        self._lock = threading.Lock()

        # Operation counters, guarded by the same lock as the data
        self._gets = 0
        self._puts = 0
        self._updates = 0
        self._deletes = 0
        self._misses = 0

    def _has(self, key: K) -> bool:
        """
        Check whether ``key`` is present.

        Not thread-safe: the caller must already hold ``self._lock``.
        """
        return key in self._data

    def get(self, key: K) -> V:
        """
        Retrieve the value for a given key.

        Args:
            key: The key to look up

        Returns:
            The stored value

        Raises:
            KeyNotFoundError: If the key is not present
        """
        with self._lock:
            self._gets += 1
            if not self._has(key):
                self._misses += 1
                raise KeyNotFoundError(key, f"value for key ({key}) does not exist")
            return self._data[key]

    def put(self, key: K, value: V) -> None:
        """
        Insert or replace a key-value pair.

        Replacing an existing key never creates a second entry.

        Args:
            key: The key to store
            value: The value to associate with the key
        """
        with self._lock:
            self._puts += 1
            self._data[key] = value

    def update(self, key: K, value: V) -> None:
        """
        Replace the value of a key that is already present.

        Args:
            key: The key to update
            value: The new value

        Raises:
            KeyNotFoundError: If the key is not present; the store is
                left unchanged
        """
        with self._lock:
            self._updates += 1
            if not self._has(key):
                self._misses += 1
                raise KeyNotFoundError(key)
            self._data[key] = value

    def delete(self, key: K) -> V:
        """
        Remove a key and return the value it held.

        Args:
            key: The key to delete

        Returns:
            The removed value

        Raises:
            KeyNotFoundError: If the key is not present
        """
        with self._lock:
            self._deletes += 1
            if not self._has(key):
                self._misses += 1
                raise KeyNotFoundError(key)
            return self._data.pop(key)

    def size(self) -> int:
        """Get the current number of keys in the store."""
        with self._lock:
            return len(self._data)

    def __len__(self) -> int:
        return self.size()

    def keys(self) -> List[K]:
        """Return a snapshot of the stored keys."""
        with self._lock:
            return list(self._data)

    def clear(self) -> None:
        """Remove all keys from the store."""
        with self._lock:
            self._data.clear()

    def get_stats(self) -> Dict[str, Any]:
        """
        Get statistics about the store.

        Returns:
            Dictionary containing:
            - total_keys: Keys currently stored
            - gets, puts, updates, deletes: Calls made to each operation
            - misses: Calls that failed because the key was absent
        """
        with self._lock:
            return {
                "total_keys": len(self._data),
                "gets": self._gets,
                "puts": self._puts,
                "updates": self._updates,
                "deletes": self._deletes,
                "misses": self._misses,
            }
