"""
KV-HTTP API Routes

Each route extracts the key (and value, for writes) from the request,
calls the matching store operation and returns a ``KVResponse``.
``KeyNotFoundError`` propagates out of the handlers and is turned into
a 404 by the handler registered in ``kvhttp.api.app``.

Handlers are plain ``def`` functions, so FastAPI runs them on its
worker thread pool and the store sees genuinely parallel callers.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, Request

from .. import __version__
from ..cache.base import Storer
from ..config.settings import settings
from .models import (
    HealthResponse,
    KVResponse,
    PutRequest,
    ResponseStatus,
    StatsResponse,
    UpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()

KeyPath = Annotated[str, Path(min_length=1, max_length=settings.MAX_KEY_LENGTH)]


def get_store(request: Request) -> Storer:
    """Return the store attached to the running application."""
    return request.app.state.store


@router.post("/put", response_model=KVResponse)
def put_value(body: PutRequest, store: Storer = Depends(get_store)) -> KVResponse:
    """Insert or replace a key-value pair."""
    store.put(body.key, body.value)
    logger.debug(f"PUT {body.key}")
    return KVResponse.stored(body.key)


@router.get("/get/{key:path}", response_model=KVResponse)
def get_value(key: KeyPath, store: Storer = Depends(get_store)) -> KVResponse:
    """Retrieve the value stored under ``key``."""
    value = store.get(key)
    return KVResponse.value_response(key, value)


@router.post("/update", response_model=KVResponse)
def update_value(body: UpdateRequest, store: Storer = Depends(get_store)) -> KVResponse:
    """Replace the value of an existing key."""
    store.update(body.key, body.value)
    logger.debug(f"UPDATE {body.key}")
    return KVResponse.updated(body.key)


@router.delete("/delete/{key:path}", response_model=KVResponse)
def delete_value(key: KeyPath, store: Storer = Depends(get_store)) -> KVResponse:
    """Remove ``key`` and return the value it held."""
    value = store.delete(key)
    logger.debug(f"DELETE {key}")
    return KVResponse.deleted(key, value)


@router.get("/stats", response_model=StatsResponse)
def get_stats(store: Storer = Depends(get_store)) -> StatsResponse:
    """Report store statistics."""
    stats = getattr(store, "get_stats", None)
    if stats is None:
        raise HTTPException(status_code=501, detail="store does not report statistics")
    return StatsResponse(**stats())


@router.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(status=ResponseStatus.OK, version=__version__)
