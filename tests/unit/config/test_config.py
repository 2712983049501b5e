"""Tests for settings and logging setup."""

import logging
from pathlib import Path

import pytest

from fieldguard.config import Settings, setup_logging
from fieldguard.config.logging import LoggerMixin, get_module_logger
from fieldguard.core.exceptions import ConfigurationError


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("LOG_LEVEL", "VALIDATION_ERROR_STATUS", "VALIDATION_STRICT", "VALIDATED_METHODS"):
            monkeypatch.delenv(f"FIELDGUARD_{name}", raising=False)

        settings = Settings()

        assert settings.DEBUG is False
        assert settings.LOG_LEVEL == "INFO"
        assert settings.LOG_FILE is None
        assert settings.VALIDATION_ERROR_STATUS == 422
        assert settings.VALIDATION_STRICT is True
        assert settings.VALIDATED_METHODS == ["POST", "PUT", "PATCH"]

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("FIELDGUARD_VALIDATION_ERROR_STATUS", "400")
        monkeypatch.setenv("FIELDGUARD_VALIDATION_STRICT", "false")
        monkeypatch.setenv("FIELDGUARD_VALIDATED_METHODS", '["post", "delete"]')

        settings = Settings()

        assert settings.VALIDATION_ERROR_STATUS == 400
        assert settings.VALIDATION_STRICT is False
        assert settings.VALIDATED_METHODS == ["POST", "DELETE"]

    def test_error_status_must_be_an_error_code(self):
        with pytest.raises(ValueError):
            Settings(VALIDATION_ERROR_STATUS=200)

    def test_to_dict_and_repr(self, test_settings):
        assert test_settings.to_dict()["VALIDATION_ERROR_STATUS"] == 422
        assert repr(test_settings) == "Settings(log_level=DEBUG, error_status=422, strict=True)"


class TestLogging:
    def test_unknown_level_is_a_configuration_error(self):
        with pytest.raises(ConfigurationError) as exc_info:
            setup_logging(Settings(LOG_LEVEL="LOUD"))

        assert exc_info.value.details == {"config_key": "LOG_LEVEL"}

    def test_log_file_is_created(self, tmp_path: Path, restore_root_logger):
        log_file = tmp_path / "logs" / "fieldguard.log"

        setup_logging(Settings(LOG_LEVEL="DEBUG", LOG_FILE=log_file))
        logging.getLogger("fieldguard.test").info("hello")

        assert log_file.parent.is_dir()
        assert logging.getLogger().level == logging.DEBUG
        assert "hello" in log_file.read_text(encoding="utf-8")

    def test_logger_mixin_names_logger_after_class(self):
        class Component(LoggerMixin):
            pass

        assert Component().logger is not None
        assert get_module_logger("schema") is not None
