# ============================================================================
# CONFIGURATION & LOGGING TESTS
# ============================================================================
# EPOCH: 1 - RUNTIME INTROSPECTION
# STATUS: Tests - Environment configuration and log formatting
# PURPOSE: Verify env overrides and structured log output
# CREATED: 18 OCT 2026
# ============================================================================
"""
Configuration & Logging Tests

Run with:
    pytest tests/test_config.py -v
"""

import json
import logging

from core.config import Defaults, get_defaults, reset_defaults
from core.logging import (
    ComponentType,
    HumanFormatter,
    StructuredFormatter,
    get_logger,
    log_checkpoint,
    log_context,
)


def _record(message="hello"):
    return logging.LogRecord("server.http", logging.INFO, __file__, 1, message, None, None)


class TestDefaults:
    """Tests for Defaults.from_env()."""

    def test_builtin_defaults(self, monkeypatch):
        for var in ("PORT", "HOST", "HEALTH_ENABLED", "HEALTH_EXPOSURE_LEVEL", "DEV_CONSOLE_ENABLED"):
            monkeypatch.delenv(var, raising=False)

        defaults = Defaults.from_env()
        assert defaults.server.port == 8080
        assert defaults.server.host == "0.0.0.0"
        assert defaults.health.enabled is True
        assert defaults.health.exposure_level == "default"
        assert defaults.console.enabled is True

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("PORT", "9090")
        monkeypatch.setenv("HEALTH_EXPOSURE_LEVEL", "full")
        monkeypatch.setenv("HEALTH_ENABLED", "false")
        monkeypatch.setenv("DEV_CONSOLE_ENABLED", "0")

        defaults = Defaults.from_env()
        assert defaults.server.port == 9090
        assert defaults.health.exposure_level == "full"
        assert defaults.health.enabled is False
        assert defaults.console.enabled is False

    def test_get_defaults_cached(self, monkeypatch):
        reset_defaults()
        monkeypatch.setenv("PORT", "7000")
        first = get_defaults()
        monkeypatch.setenv("PORT", "7001")

        assert get_defaults() is first
        assert first.server.port == 7000
        reset_defaults()


class TestFormatters:
    """Tests for the log formatters."""

    def test_structured_includes_context(self):
        with log_context(feature="health", path="/health"):
            data = json.loads(StructuredFormatter().format(_record()))

        assert data["message"] == "hello"
        assert data["logger"] == "server.http"
        assert data["context"] == {"feature": "health", "path": "/health"}

    def test_human_includes_context(self):
        with log_context(feature="console"):
            line = HumanFormatter().format(_record())

        assert "server.http [feature=console]: hello" in line

    def test_context_is_restored(self):
        with log_context(feature="health"):
            pass
        assert "feature" not in json.loads(StructuredFormatter().format(_record())).get("context", {})


class TestComponentLogger:
    """Tests for get_logger() component tagging."""

    def test_component_reaches_structured_output(self, caplog):
        logger = get_logger("server.http", ComponentType.SERVER)
        with caplog.at_level(logging.INFO, logger="server.http"):
            logger.info("registered")

        data = json.loads(StructuredFormatter().format(caplog.records[-1]))
        assert data["component"] == "server"
        assert data["message"] == "registered"

    def test_component_in_human_output(self, caplog):
        logger = get_logger("health.render", ComponentType.HEALTH)
        with caplog.at_level(logging.INFO, logger="health.render"):
            with log_context(path="/health"):
                logger.info("rendered")
                line = HumanFormatter().format(caplog.records[-1])

        assert "health.render [component=health, path=/health]: rendered" in line

    def test_no_component_omitted(self):
        data = json.loads(StructuredFormatter().format(_record()))
        assert "component" not in data

    def test_checkpoint_data(self, caplog):
        with caplog.at_level(logging.INFO, logger="checkpoint"):
            with log_context(feature="health"):
                log_checkpoint("feature_activated", {"port": 8080})

        data = json.loads(StructuredFormatter().format(caplog.records[-1]))
        assert data["data"] == {
            "checkpoint": "feature_activated",
            "feature": "health",
            "port": 8080,
        }
