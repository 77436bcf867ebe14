"""Tests for shared/logging.py."""

import logging

from shared.logging import HealthCheckFilter, get_logging_config


def make_record(name: str, message: str) -> logging.LogRecord:
    return logging.LogRecord(name, logging.INFO, __file__, 1, message, None, None)


class TestHealthCheckFilter:
    def test_drops_health_access_lines(self):
        """uvicorn access lines for GET /health are filtered."""
        record = make_record("uvicorn.access", '127.0.0.1 - "GET /api/health HTTP/1.1" 200')
        assert HealthCheckFilter().filter(record) is False

    def test_keeps_other_lines(self):
        """Everything else passes through."""
        access = make_record("uvicorn.access", '127.0.0.1 - "GET /api/users HTTP/1.1" 200')
        app_log = make_record("modules.users.seed", "GET /health mentioned in app log")
        assert HealthCheckFilter().filter(access) is True
        assert HealthCheckFilter().filter(app_log) is True


class TestLoggingConfig:
    def test_level_is_normalised(self):
        """Levels are upper-cased for every logger."""
        config = get_logging_config("debug")
        assert config["root"]["level"] == "DEBUG"
        assert config["loggers"]["uvicorn"]["level"] == "DEBUG"

    def test_access_handler_uses_filter(self):
        """Access logs go through the health check filter."""
        config = get_logging_config()
        assert config["handlers"]["access"]["filters"] == ["health_check_filter"]
        assert config["disable_existing_loggers"] is False
