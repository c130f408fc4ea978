import pytest
import structlog

from selectorkit.config.logging import setup_logging
from selectorkit.config.settings import Settings, get_settings


@pytest.mark.unit
class TestSettings:
    def test_default_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        monkeypatch.delenv("JSON_SORT_KEYS", raising=False)
        settings = Settings()
        assert settings.log_level == "INFO"
        assert settings.json_logs is False
        assert settings.json_sort_keys is False

    def test_settings_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("JSON_LOGS", "true")
        monkeypatch.setenv("JSON_SORT_KEYS", "1")
        settings = Settings()
        assert settings.log_level == "DEBUG"
        assert settings.json_logs is True
        assert settings.json_sort_keys is True

    def test_get_settings_is_cached(self) -> None:
        assert get_settings() is get_settings()


@pytest.mark.unit
class TestLogging:
    def test_setup_logging_configures_structlog(self) -> None:
        setup_logging(log_level="DEBUG", json_output=True)
        assert structlog.is_configured()
        logger = structlog.get_logger("selectorkit.test")
        logger.debug("configured", ok=True)

    def test_setup_logging_uses_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "WARNING")
        setup_logging()
        assert structlog.is_configured()
        structlog.get_logger("selectorkit.test").warning("configured_from_settings")
