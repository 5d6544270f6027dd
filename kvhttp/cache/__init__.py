"""Cache module for KV-HTTP."""

from .base import Storer
from .exceptions import KeyNotFoundError
from .store import KVStore

__all__ = ["KVStore", "KeyNotFoundError", "Storer"]
