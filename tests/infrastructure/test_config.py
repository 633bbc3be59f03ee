"""Tests for environment-driven configuration."""

import logging

import pytest

from cactus_shop import config


class TestLogLevel:

    def test_default(self, monkeypatch):
        monkeypatch.delenv(config.LOG_LEVEL_ENV, raising=False)
        assert config.get_log_level() == logging.WARNING

    @pytest.mark.parametrize("raw", ["debug", "DEBUG", " Debug "])
    def test_from_env_is_case_insensitive(self, monkeypatch, raw):
        monkeypatch.setenv(config.LOG_LEVEL_ENV, raw)
        assert config.get_log_level() == logging.DEBUG

    def test_unknown_level(self, monkeypatch):
        monkeypatch.setenv(config.LOG_LEVEL_ENV, "chatty")
        with pytest.raises(config.ConfigError, match="Unknown log level"):
            config.get_log_level()


class TestEventLoggerName:

    def test_default(self, monkeypatch):
        monkeypatch.delenv(config.EVENT_LOGGER_ENV, raising=False)
        assert config.get_event_logger_name() == "cactus_shop.events"

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv(config.EVENT_LOGGER_ENV, "shop.audit")
        assert config.get_event_logger_name() == "shop.audit"

    def test_blank_rejected(self, monkeypatch):
        monkeypatch.setenv(config.EVENT_LOGGER_ENV, "  ")
        with pytest.raises(config.ConfigError):
            config.get_event_logger_name()
