#!/usr/bin/env python3
"""
Interactive Test Client for KV-HTTP

A simple command-line client for manually testing the KV-HTTP server.

Usage:
    python scripts/client.py                  # Connect to localhost:3000
    python scripts/client.py --host 1.2.3.4   # Connect to specific host
    python scripts/client.py --port 8080      # Connect to specific port

Commands:
    PUT <key> <value>     - Store a key-value pair
    GET <key>             - Retrieve a value
    UPDATE <key> <value>  - Replace the value of an existing key
    DELETE <key>          - Delete a key and show its value
    STATS                 - Show store statistics
    help                  - Show this help
    exit                  - Exit client

Values are parsed as JSON when possible, so ``PUT n 42`` stores the
number 42 and ``PUT s hello`` stores the string "hello".
"""

import argparse
import json
import sys
from typing import Any
from urllib.parse import quote

import httpx

# Enable command history with arrow keys (works on Unix systems)
try:
    import readline  # noqa: F401
except ImportError:
    pass  # readline not available on Windows by default


def parse_value(raw: str) -> Any:
    """Interpret a command-line value as JSON, falling back to a plain string."""
    try:
        return json.loads(raw)
    except ValueError:
        return raw


class KVHttpClient:
    """Simple HTTP client for KV-HTTP."""

    def __init__(self, host: str, port: int, timeout: float = 5.0):
        self.base_url = f"http://{host}:{port}"
        self.http = httpx.Client(base_url=self.base_url, timeout=timeout)

    def close(self):
        self.http.close()

    def put(self, key: str, value: Any) -> httpx.Response:
        return self.http.post("/put", json={"key": key, "value": value})

    def get(self, key: str) -> httpx.Response:
        return self.http.get(f"/get/{quote(key, safe='')}")

    def update(self, key: str, value: Any) -> httpx.Response:
        return self.http.post("/update", json={"key": key, "value": value})

    def delete(self, key: str) -> httpx.Response:
        return self.http.delete(f"/delete/{quote(key, safe='')}")

    def stats(self) -> httpx.Response:
        return self.http.get("/stats")

    def health(self) -> httpx.Response:
        return self.http.get("/health")

    def send_command(self, command: str) -> str:
        """Run one text command and return a printable result."""
        parts = command.split(maxsplit=2)
        name = parts[0].upper()

        try:
            if name in ("PUT", "UPDATE") and len(parts) == 3:
                key, value = parts[1], parse_value(parts[2])
                response = self.put(key, value) if name == "PUT" else self.update(key, value)
            elif name in ("GET", "DELETE") and len(parts) == 2:
                response = self.get(parts[1]) if name == "GET" else self.delete(parts[1])
            elif name == "STATS" and len(parts) == 1:
                response = self.stats()
            else:
                return "ERROR: invalid command (type 'help')"
        except httpx.TimeoutException:
            return "ERROR: Request timed out"
        except httpx.HTTPError as e:
            return f"ERROR: {e}"

        try:
            body = json.dumps(response.json())
        except ValueError:
            body = response.text
        return f"{response.status_code} {body}"

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


def print_help():
    """Print help message."""
    print("""
KV-HTTP Commands:
-----------------
  PUT <key> <value>         Store a key-value pair (value parsed as JSON)
  GET <key>                 Retrieve the value for a key
  UPDATE <key> <value>      Replace the value of an existing key
  DELETE <key>              Delete a key and print its value
  STATS                     Show store statistics

Client Commands:
----------------
  help                      Show this help message
  exit                      Exit the client
  status                    Check the server is reachable

Examples:
---------
  PUT mykey myvalue         Store "myvalue" under "mykey"
  PUT user:1 {"age": 36}    Store a JSON object
  UPDATE mykey other        Replace the value of "mykey"
  GET mykey                 Get value for "mykey"
  DELETE mykey              Delete "mykey"
""")


def main():
    parser = argparse.ArgumentParser(
        description="Interactive test client for KV-HTTP"
    )
    parser.add_argument(
        "--host",
        type=str,
        default="localhost",
        help="Server host (default: localhost)"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=3000,
        help="Server port (default: 3000)"
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=5.0,
        help="Request timeout in seconds (default: 5.0)"
    )

    args = parser.parse_args()

    print("KV-HTTP Client")
    print("==============")
    print(f"Connecting to {args.host}:{args.port}...")

    with KVHttpClient(args.host, args.port, args.timeout) as client:
        try:
            client.health().raise_for_status()
        except httpx.HTTPError as e:
            print(f"Failed to connect ({e}). Is the server running?")
            print(f"  Try: python -m kvhttp.server --port {args.port}")
            sys.exit(1)

        print("Connected! Type 'help' for commands.\n")

        try:
            while True:
                try:
                    command = input(">>> ").strip()
                except EOFError:
                    print("\nGoodbye!")
                    break

                if not command:
                    continue

                lower_cmd = command.lower()

                if lower_cmd == "help":
                    print_help()
                    continue

                if lower_cmd in ("exit", "quit"):
                    print("Goodbye!")
                    break

                if lower_cmd == "status":
                    try:
                        version = client.health().json()["version"]
                        print(f"Status: Connected (server version {version})")
                    except httpx.HTTPError as e:
                        print(f"Status: Unreachable ({e})")
                    print(f"Server: {client.base_url}")
                    continue

                print(client.send_command(command))

        except KeyboardInterrupt:
            print("\n\nInterrupted. Goodbye!")


if __name__ == "__main__":
    main()
