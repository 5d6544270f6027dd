"""Structural interface for key-value stores."""

from typing import Protocol, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class Storer(Protocol[K, V]):
    """
    The four operations the HTTP layer needs from a store.

    ``get``, ``update`` and ``delete`` raise ``KeyNotFoundError`` when
    the key is absent. ``put`` never does.
    """

    def get(self, key: K) -> V:
        ...

    def put(self, key: K, value: V) -> None:
        ...

    def update(self, key: K, value: V) -> None:
        ...

    def delete(self, key: K) -> V:
        ...
