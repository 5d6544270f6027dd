#!/usr/bin/env python3
"""
KV-HTTP Server Entry Point

This is the main entry point for starting the KV-HTTP server.

Usage:
    python -m kvhttp.server                    # Default settings (0.0.0.0:3000)
    python -m kvhttp.server --port 8080        # Custom port
    python -m kvhttp.server --host 127.0.0.1   # Custom host
    python -m kvhttp.server --debug            # Enable debug logging

Environment Variables:
    KV_HTTP_HOST       - Server bind address
    KV_HTTP_PORT       - Server port
    KV_HTTP_DEBUG      - Enable debug mode (true/false)
    KV_HTTP_LOG_LEVEL  - Log level when not in debug mode
"""

import argparse
import logging
import sys
from typing import List, Optional

import uvicorn

from .api.app import create_app
from .cache.store import KVStore
from .config.settings import settings


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="KV-HTTP: In-Memory Key-Value Store Server",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parser.add_argument(
        "--host",
        type=str,
        default=settings.HOST,
        help="Host address to bind to",
    )

    parser.add_argument(
        "--port",
        type=int,
        default=settings.PORT,
        help="Port number to listen on",
    )

    parser.add_argument(
        "--log-level",
        type=str,
        default=settings.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (ignored with --debug)",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        default=settings.DEBUG,
        help="Enable debug logging",
    )

    return parser.parse_args(argv)


def setup_logging(debug: bool = False, level: str = "INFO") -> None:
    """Configure logging based on debug flag."""
    log_level = logging.DEBUG if debug else getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout),
        ]
    )


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the server."""
    args = parse_args(argv)

    setup_logging(debug=args.debug, level=args.log_level)
    logger = logging.getLogger(__name__)

    store: KVStore = KVStore()
    app = create_app(store)

    logger.info("Starting KV-HTTP server")
    logger.info(f"  Host: {args.host}")
    logger.info(f"  Port: {args.port}")
    logger.info(f"  Debug: {args.debug}")

    try:
        # uvicorn installs its own SIGINT/SIGTERM handlers for graceful shutdown
        uvicorn.run(
            app,
            host=args.host,
            port=args.port,
            log_level="debug" if args.debug else args.log_level.lower(),
            log_config=None,
        )
    except Exception as e:
        logger.error(f"Server error: {e}")
        raise
    finally:
        logger.info("Server shutdown complete")


if __name__ == "__main__":
    main()
