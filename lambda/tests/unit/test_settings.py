"""
Testes dos helpers de configuração por variável de ambiente
"""
import pytest

from shared.config import settings
from shared.config.logger_config import DEFAULT_SERVICE_NAME, get_logger


class TestEnvHelpers:

    def test_env_int_default(self, monkeypatch):
        monkeypatch.delenv('FORECAST_DAYS_TEST', raising=False)
        assert settings._env_int('FORECAST_DAYS_TEST', 7) == 7

    def test_env_int_blank_uses_default(self, monkeypatch):
        monkeypatch.setenv('FORECAST_DAYS_TEST', '  ')
        assert settings._env_int('FORECAST_DAYS_TEST', 7) == 7

    def test_env_int_override(self, monkeypatch):
        monkeypatch.setenv('FORECAST_DAYS_TEST', '10')
        assert settings._env_int('FORECAST_DAYS_TEST', 7) == 10

    def test_env_int_invalid(self, monkeypatch):
        monkeypatch.setenv('FORECAST_DAYS_TEST', 'ten')
        with pytest.raises(ValueError, match="must be an integer"):
            settings._env_int('FORECAST_DAYS_TEST', 7)

    def test_env_choice_is_normalized(self, monkeypatch):
        monkeypatch.setenv('WIND_UNIT_TEST', ' MPH ')
        assert settings._env_choice('WIND_UNIT_TEST', 'kmh', ('kmh', 'mph')) == 'mph'

    def test_env_choice_invalid(self, monkeypatch):
        monkeypatch.setenv('WIND_UNIT_TEST', 'beaufort')
        with pytest.raises(ValueError, match="must be one of"):
            settings._env_choice('WIND_UNIT_TEST', 'kmh', ('kmh', 'mph'))

    def test_defaults(self):
        assert settings.OPENMETEO_BASE_URL.startswith("https://")
        assert 1 <= settings.FORECAST_DAYS <= 16
        assert settings.FORECAST_ENTRIES >= 1


class TestLogger:

    def test_service_name_from_env(self, monkeypatch):
        monkeypatch.setenv('DD_SERVICE', 'weather-test')
        assert get_logger().service == 'weather-test'

    def test_default_service_name(self, monkeypatch):
        monkeypatch.delenv('DD_SERVICE', raising=False)
        assert get_logger().service == DEFAULT_SERVICE_NAME
