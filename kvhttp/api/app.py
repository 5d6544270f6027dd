"""
FastAPI Application Factory

Builds the KV-HTTP application around a single shared store.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .. import __version__
from ..cache.base import Storer
from ..cache.exceptions import KeyNotFoundError
from ..cache.store import KVStore
from ..config.settings import settings
from .models import KVResponse
from .routes import router

logger = logging.getLogger(__name__)


async def key_not_found_handler(request: Request, exc: KeyNotFoundError) -> JSONResponse:
    """Map a missing key to a 404 response."""
    logger.debug(f"{request.method} {request.url.path}: {exc}")
    body = KVResponse.key_not_found(str(exc.key), message=str(exc))
    return JSONResponse(status_code=404, content=body.model_dump(mode="json"))


def create_app(store: Optional[Storer] = None) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        store: Store shared by every request (creates a new KVStore if
            not provided)

    Returns:
        The configured application. The store is available as
        ``app.state.store``.
    """
    app = FastAPI(
        title=settings.APP_TITLE,
        version=__version__,
        description="In-memory key-value store over HTTP.",
    )
    app.state.store = store if store is not None else KVStore()
    app.add_exception_handler(KeyNotFoundError, key_not_found_handler)
    app.include_router(router)
    return app
