"""
Tests for holidaytheme/main.py - app creation, middleware and lifespan.
"""
import logging
import pytest
from unittest.mock import MagicMock, patch
from fastapi import FastAPI

from holidaytheme.main import CorrelationIdMiddleware, create_app, lifespan
from holidaytheme.utils.logging import (
    StructuredJsonFormatter,
    configure_structured_logging,
    log_context,
    set_correlation_id,
)


def _make_mock_settings(**overrides):
    defaults = {
        "app_env": "test",
        "app_base_url": "http://localhost:8000",
        "log_level": "WARNING",
        "cors_origins": [],
        "midnight_buffer_ms": 1000,
    }
    defaults.update(overrides)
    settings = MagicMock()
    for k, v in defaults.items():
        setattr(settings, k, v)
    return settings


class TestCreateApp:
    def test_returns_fastapi_instance(self):
        with (
            patch("holidaytheme.main.get_settings", return_value=_make_mock_settings()),
            patch("holidaytheme.main.configure_structured_logging") as configure,
        ):
            app = create_app()

        assert isinstance(app, FastAPI)
        assert app.title == "holidaytheme"
        configure.assert_called_once_with("WARNING")

    def test_correlation_middleware_installed(self):
        with (
            patch("holidaytheme.main.get_settings", return_value=_make_mock_settings()),
            patch("holidaytheme.main.configure_structured_logging"),
        ):
            app = create_app()

        assert any(m.cls is CorrelationIdMiddleware for m in app.user_middleware)


class TestLifespan:
    @pytest.mark.asyncio
    async def test_starts_and_stops_refresher(self):
        from holidaytheme.schemas.holiday_settings import HolidayResolutionConfig

        settings = _make_mock_settings()
        settings.holiday_config.return_value = HolidayResolutionConfig(timezone="Europe/Paris")
        app = FastAPI()

        with patch("holidaytheme.main.get_settings", return_value=settings):
            async with lifespan(app):
                refresher = app.state.holiday_refresher
                assert refresher.pending
                assert refresher.config.timezone == "Europe/Paris"

        assert not refresher.pending

    @pytest.mark.asyncio
    async def test_invalid_timezone_logged(self, caplog):
        from holidaytheme.schemas.holiday_settings import HolidayResolutionConfig

        settings = _make_mock_settings()
        settings.holiday_config.return_value = HolidayResolutionConfig(timezone="Bad/Zone")
        app = FastAPI()

        with (
            patch("holidaytheme.main.get_settings", return_value=settings),
            caplog.at_level(logging.WARNING),
        ):
            async with lifespan(app):
                assert app.state.holiday_refresher.state.local_date is not None

        assert "not a valid IANA zone" in caplog.text


class TestStructuredLogging:
    def test_formats_holiday_extras_as_json(self):
        import json

        set_correlation_id("cid-1")
        record = logging.LogRecord("holidaytheme.test", logging.INFO, __file__, 1, "hello %s", ("world",), None)
        record.holiday_id = "diwali"
        record.year = 2025

        entry = json.loads(StructuredJsonFormatter().format(record))
        assert entry["message"] == "hello world"
        assert entry["correlation_id"] == "cid-1"
        assert entry["holiday_id"] == "diwali"
        assert entry["year"] == 2025
        assert "timezone" not in entry

    def test_bound_context_fills_missing_fields(self):
        import json

        formatter = StructuredJsonFormatter()
        record = logging.LogRecord("holidaytheme.test", logging.DEBUG, __file__, 1, "skip", (), None)
        with log_context(timezone="Asia/Tokyo", holiday_id=None):
            entry = json.loads(formatter.format(record))
        assert entry["timezone"] == "Asia/Tokyo"
        assert "holiday_id" not in entry

        after = json.loads(formatter.format(record))
        assert "timezone" not in after

    def test_explicit_extra_wins_over_bound_context(self):
        import json

        record = logging.LogRecord("holidaytheme.test", logging.INFO, __file__, 1, "x", (), None)
        record.timezone = "Europe/Paris"
        with log_context(timezone="Asia/Tokyo"):
            entry = json.loads(StructuredJsonFormatter().format(record))
        assert entry["timezone"] == "Europe/Paris"

    def test_timestamp_is_record_creation_time(self):
        import json

        record = logging.LogRecord("holidaytheme.test", logging.INFO, __file__, 1, "x", (), None)
        record.created = 0.0
        entry = json.loads(StructuredJsonFormatter().format(record))
        assert entry["timestamp"] == "1970-01-01T00:00:00.000Z"

    def test_custom_field_list(self):
        import json

        record = logging.LogRecord("holidaytheme.test", logging.INFO, __file__, 1, "x", (), None)
        record.year = 2033
        record.delay_ms = 5
        entry = json.loads(StructuredJsonFormatter(fields=("year",)).format(record))
        assert entry["year"] == 2033
        assert "delay_ms" not in entry

    def test_configure_installs_single_json_handler(self):
        root = logging.getLogger()
        saved_handlers, saved_level = list(root.handlers), root.level
        try:
            handler = configure_structured_logging("debug")
            assert root.handlers == [handler]
            assert isinstance(handler.formatter, StructuredJsonFormatter)
            assert root.level == logging.DEBUG
        finally:
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)
