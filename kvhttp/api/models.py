"""
HTTP Request and Response Models

Pydantic models describing the JSON bodies accepted and returned by
the KV-HTTP routes.
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field

from ..config.settings import settings


class ResponseStatus(str, Enum):
    """Enumeration of response statuses."""
    OK = "OK"
    ERROR = "ERROR"


class PutRequest(BaseModel):
    """Body of a PUT (insert-or-replace) request."""

    key: str = Field(..., min_length=1, max_length=settings.MAX_KEY_LENGTH)
    value: Any


class UpdateRequest(PutRequest):
    """Body of an UPDATE request. Same shape as a PUT."""


class KVResponse(BaseModel):
    """
    Represents a response from one of the store routes.

    Attributes:
        status: OK or ERROR
        message: Response message or error description
        key: The key the operation addressed
        value: The value returned (for GET and DELETE)
    """

    status: ResponseStatus
    message: str = ""
    key: Optional[str] = None
    value: Any = None

    @classmethod
    def ok(cls, key: str, message: str = "", value: Any = None) -> "KVResponse":
        """Create a successful response."""
        return cls(status=ResponseStatus.OK, message=message, key=key, value=value)

    @classmethod
    def error(cls, message: str, key: Optional[str] = None) -> "KVResponse":
        """Create an error response."""
        return cls(status=ResponseStatus.ERROR, message=message, key=key)

    @classmethod
    def stored(cls, key: str) -> "KVResponse":
        return cls.ok(key, message="stored")

    @classmethod
    def updated(cls, key: str) -> "KVResponse":
        return cls.ok(key, message="updated")

    @classmethod
    def deleted(cls, key: str, value: Any) -> "KVResponse":
        return cls.ok(key, message="deleted", value=value)

    @classmethod
    def value_response(cls, key: str, value: Any) -> "KVResponse":
        return cls.ok(key, value=value)

    @classmethod
    def key_not_found(cls, key: str, message: str = "key not found") -> "KVResponse":
        return cls.error(message, key=key)


class StatsResponse(BaseModel):
    """Store statistics."""

    total_keys: int
    gets: int
    puts: int
    updates: int
    deletes: int
    misses: int


class HealthResponse(BaseModel):
    """Health check response model."""

    status: ResponseStatus
    version: str
