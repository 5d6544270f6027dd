"""Errors raised by the key-value store."""

from typing import Any, Optional


class KeyNotFoundError(LookupError):
    """
    Raised when an operation references a key that is not present.

    There is no distinction between a key that never existed and one
    that has been deleted.

    Attributes:
        key: The key that was looked up
    """

    def __init__(self, key: Any, message: Optional[str] = None):
        self.key = key
        self.message = message if message is not None else f"the key ({key}) does not exist"
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message
