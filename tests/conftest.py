"""
Pytest Configuration and Fixtures

This module provides shared fixtures and configuration for all tests.
"""

import asyncio
import socket
import pytest
import pytest_asyncio
import httpx
import uvicorn
from contextlib import closing
from typing import AsyncGenerator

from fastapi import FastAPI

from kvhttp.api.app import create_app
from kvhttp.cache.store import KVStore


def find_free_port() -> int:
    """Find an available port for testing."""
    with closing(socket.socket(socket.AF_INET, socket.SOCK_STREAM)) as s:
        s.bind(('', 0))
        s.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        return s.getsockname()[1]


# ============================================================================
# KVStore Fixtures
# ============================================================================

@pytest.fixture
def store() -> KVStore:
    """Create a fresh, empty KVStore instance."""
    return KVStore()


# ============================================================================
# Application Fixtures
# ============================================================================

@pytest.fixture
def app(store: KVStore) -> FastAPI:
    """Create an application backed by the ``store`` fixture."""
    return create_app(store)


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncGenerator[httpx.AsyncClient, None]:
    """
    In-process HTTP client.

    Requests are dispatched straight to the ASGI app without opening
    a socket.
    """
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as c:
        yield c


# ============================================================================
# Server Fixtures
# ============================================================================

@pytest.fixture
def server_port() -> int:
    """Get a free port for server testing."""
    return find_free_port()


@pytest_asyncio.fixture
async def server(app: FastAPI, server_port: int) -> AsyncGenerator[uvicorn.Server, None]:
    """
    Create and start a real uvicorn server for testing.

    This fixture:
    1. Creates a uvicorn server on a random free port
    2. Starts it in a background task
    3. Yields the server once it is accepting connections
    4. Cleans up after the test
    """
    config = uvicorn.Config(
        app,
        host='127.0.0.1',
        port=server_port,
        log_level="warning",
        log_config=None,
    )
    srv = uvicorn.Server(config)

    server_task = asyncio.create_task(srv.serve())

    # Wait for server to be ready
    for _ in range(500):
        if srv.started:
            break
        await asyncio.sleep(0.01)

    yield srv

    # Cleanup
    srv.should_exit = True
    try:
        await asyncio.wait_for(server_task, timeout=5)
    except asyncio.TimeoutError:
        server_task.cancel()


@pytest_asyncio.fixture
async def live_client(
    server: uvicorn.Server,
    server_port: int
) -> AsyncGenerator[httpx.AsyncClient, None]:
    """HTTP client connected to the live server over TCP."""
    async with httpx.AsyncClient(base_url=f"http://127.0.0.1:{server_port}") as c:
        yield c


# ============================================================================
# Pytest Configuration
# ============================================================================

def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )


