"""
Tests for the server entry point

These tests cover argument parsing, logging setup and the wiring
between main() and uvicorn.

Run with: python -m pytest tests/test_server.py -v
"""

import logging

import pytest

from kvhttp import server
from kvhttp.cache import KVStore
from kvhttp.config.settings import Settings, settings


class TestParseArgs:
    """Test parse_args()."""

    def test_defaults_come_from_settings(self):
        args = server.parse_args([])

        assert args.host == settings.HOST
        assert args.port == settings.PORT
        assert args.log_level == settings.LOG_LEVEL
        assert args.debug == settings.DEBUG

    def test_overrides(self):
        args = server.parse_args(
            ["--host", "127.0.0.1", "--port", "8080", "--debug", "--log-level", "WARNING"]
        )

        assert args.host == "127.0.0.1"
        assert args.port == 8080
        assert args.debug is True
        assert args.log_level == "WARNING"

    def test_invalid_log_level(self):
        with pytest.raises(SystemExit):
            server.parse_args(["--log-level", "LOUD"])


class TestSettings:
    """Test the Settings dataclass."""

    def test_default_port_and_limits(self):
        s = Settings()
        assert isinstance(s.PORT, int)
        assert s.MAX_KEY_LENGTH == 256
        assert s.APP_TITLE == "KV-HTTP"


class TestSetupLogging:
    """Test setup_logging()."""

    def test_debug_level(self, monkeypatch):
        calls = {}
        monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.update(kw))

        server.setup_logging(debug=True)

        assert calls["level"] == logging.DEBUG

    def test_named_level(self, monkeypatch):
        calls = {}
        monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.update(kw))

        server.setup_logging(debug=False, level="warning")

        assert calls["level"] == logging.WARNING


class TestMain:
    """Test main() hands a configured app to uvicorn."""

    def test_main_runs_uvicorn(self, monkeypatch):
        captured = {}

        def fake_run(app, **kwargs):
            captured["app"] = app
            captured.update(kwargs)

        monkeypatch.setattr(server.uvicorn, "run", fake_run)
        monkeypatch.setattr(server, "setup_logging", lambda **kw: None)

        server.main(["--host", "127.0.0.1", "--port", "9999"])

        assert captured["host"] == "127.0.0.1"
        assert captured["port"] == 9999
        assert isinstance(captured["app"].state.store, KVStore)

    def test_main_reraises_server_errors(self, monkeypatch):
        def failing_run(app, **kwargs):
            raise OSError("address already in use")

        monkeypatch.setattr(server.uvicorn, "run", failing_run)
        monkeypatch.setattr(server, "setup_logging", lambda **kw: None)

        with pytest.raises(OSError):
            server.main(["--port", "9999"])
