"""Unit tests for settings and logging setup."""

import pytest
import structlog
from structlog.testing import capture_logs

from regexform import configure_logging
from regexform.config import Settings, get_settings


@pytest.mark.unit
class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("DEBUG", raising=False)
        monkeypatch.delenv("LOG_LEVEL", raising=False)

        settings = Settings(_env_file=None)

        assert settings.DEBUG is False
        assert settings.LOG_LEVEL == "info"

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("DEBUG", "true")
        monkeypatch.setenv("LOG_LEVEL", "warning")
        get_settings.cache_clear()

        try:
            settings = get_settings()
            assert settings.DEBUG is True
            assert settings.LOG_LEVEL == "warning"
        finally:
            get_settings.cache_clear()


@pytest.mark.unit
class TestConfigureLogging:
    @pytest.fixture(autouse=True)
    def _restore(self):
        yield
        configure_logging(Settings(_env_file=None, DEBUG=True, LOG_LEVEL="info"))

    def test_json_renderer_outside_debug(self):
        configure_logging(Settings(_env_file=None, DEBUG=False, LOG_LEVEL="info"))

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_console_renderer_in_debug(self):
        configure_logging(Settings(_env_file=None, DEBUG=True, LOG_LEVEL="debug"))

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_unknown_level_falls_back_to_info(self):
        configure_logging(Settings(_env_file=None, LOG_LEVEL="chatty"))
        logger = structlog.get_logger()

        with capture_logs() as logs:
            logger.debug("hidden")
            logger.info("shown")

        assert [e["event"] for e in logs] == ["shown"]
