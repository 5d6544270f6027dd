"""
KV-HTTP: In-Memory Key-Value Store over HTTP

A generic, thread-safe, in-process key-value store served through
a small FastAPI application.
"""

__version__ = "1.0.0"
