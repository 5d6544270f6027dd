"""
KV-HTTP Configuration Settings

This module contains all configuration constants for the KV-HTTP server.
Values can be overridden through environment variables or CLI flags.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Server configuration settings."""

    # Network settings
    HOST: str = os.environ.get("KV_HTTP_HOST", "0.0.0.0")
    PORT: int = int(os.environ.get("KV_HTTP_PORT", "3000"))

    # Request validation
    MAX_KEY_LENGTH: int = 256

    # Application metadata
    APP_TITLE: str = "KV-HTTP"

    # Logging settings
    DEBUG: bool = os.environ.get("KV_HTTP_DEBUG", "false").lower() == "true"
    LOG_LEVEL: str = os.environ.get("KV_HTTP_LOG_LEVEL", "INFO")


# Global settings instance
settings = Settings()
