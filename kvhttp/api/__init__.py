"""HTTP API module for KV-HTTP."""

from .app import create_app
from .models import KVResponse, PutRequest, ResponseStatus, StatsResponse, UpdateRequest

__all__ = [
    "create_app",
    "KVResponse",
    "PutRequest",
    "ResponseStatus",
    "StatsResponse",
    "UpdateRequest",
]
