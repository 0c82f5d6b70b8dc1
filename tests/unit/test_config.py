"""Tests for environment settings and logging setup."""

import logging

import pytest
import structlog

from aquaflow.config import Settings
from aquaflow.log import configure_logging


class TestSettings:
    def test_defaults(self):
        settings = Settings.from_env({})
        assert settings == Settings()
        assert settings.host == "0.0.0.0"
        assert settings.port == 8000
        assert settings.debug is False
        assert settings.pools_url is None
        assert settings.provider_timeout == 5.0
        assert settings.log_level == "INFO"

    def test_from_env(self):
        settings = Settings.from_env(
            {
                "AQUAFLOW_HOST": "127.0.0.1",
                "AQUAFLOW_PORT": "9000",
                "AQUAFLOW_DEBUG": "yes",
                "AQUAFLOW_POOLS_URL": "https://pools.example.org",
                "AQUAFLOW_PROVIDER_TIMEOUT": "2.5",
                "AQUAFLOW_LOG_LEVEL": "debug",
            }
        )
        assert settings.host == "127.0.0.1"
        assert settings.port == 9000
        assert settings.debug is True
        assert settings.pools_url == "https://pools.example.org"
        assert settings.provider_timeout == 2.5
        assert settings.log_level == "DEBUG"

    def test_empty_pools_url_means_static(self):
        assert Settings.from_env({"AQUAFLOW_POOLS_URL": ""}).pools_url is None

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv("AQUAFLOW_PORT", "8123")
        assert Settings.from_env().port == 8123

    def test_bad_number(self):
        with pytest.raises(ValueError):
            Settings.from_env({"AQUAFLOW_PORT": "eighty"})


class TestConfigureLogging:
    @pytest.fixture(autouse=True)
    def restore_structlog(self):
        yield
        structlog.reset_defaults()

    def test_filters_below_level(self, capsys):
        configure_logging("WARNING")
        logger = structlog.get_logger()

        logger.info("quiet_event")
        logger.warning("loud_event", pool_id="p1")

        out = capsys.readouterr().out
        assert "quiet_event" not in out
        assert "loud_event" in out
        assert "pool_id" in out

    def test_accepts_level_constant(self, capsys):
        configure_logging(logging.DEBUG)
        structlog.get_logger().debug("debug_event")
        assert "debug_event" in capsys.readouterr().out
