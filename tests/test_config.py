"""Tests for ServiceConfig."""

import logging
import os

import pytest

from serviceforge.config import ServiceConfig


class TestFromEnv:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("SERVICEFORGE_LOG_LEVEL", raising=False)
        monkeypatch.delenv("SERVICEFORGE_SERVICE_PATH", raising=False)
        config = ServiceConfig.from_env()
        assert config.log_level == "WARNING"
        assert config.service_path == []

    def test_log_level_from_env(self, monkeypatch):
        monkeypatch.setenv("SERVICEFORGE_LOG_LEVEL", "debug")
        config = ServiceConfig.from_env()
        assert config.log_level == "DEBUG"
        assert config.level == logging.DEBUG

    def test_service_path_split(self, monkeypatch):
        monkeypatch.setenv(
            "SERVICEFORGE_SERVICE_PATH", os.pathsep.join(["/a", "", "/b"])
        )
        assert ServiceConfig.from_env().service_path == ["/a", "/b"]


class TestLevel:
    def test_unknown_level_raises(self):
        with pytest.raises(ValueError, match="Unknown log level"):
            ServiceConfig(log_level="LOUD").level

    def test_lowercase_accepted(self):
        assert ServiceConfig(log_level="info").level == logging.INFO
