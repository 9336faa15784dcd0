"""
Configurações e fixtures compartilhadas para testes unitários
"""
import json
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

FIXTURES_PATH = Path(__file__).parent.parent / 'fixtures'


def load_fixture(file_name: str, key: str) -> dict:
    with open(FIXTURES_PATH / file_name, 'r', encoding='utf-8') as f:
        return json.load(f)[key]


def make_mock_response(payload=None, status: int = 200, text: str = ''):
    """Resposta aiohttp falsa utilizável com `async with`"""
    mock_response = AsyncMock()
    mock_response.status = status
    mock_response.json = AsyncMock(return_value=payload)
    mock_response.text = AsyncMock(return_value=text)
    mock_response.__aenter__ = AsyncMock(return_value=mock_response)
    mock_response.__aexit__ = AsyncMock(return_value=False)
    return mock_response


def make_session_manager(response=None, side_effect=None):
    """Session manager falso cujo session.get devolve `response` ou aplica `side_effect`"""
    mock_session = MagicMock()
    if side_effect is not None:
        mock_session.get = MagicMock(side_effect=side_effect)
    else:
        mock_session.get = MagicMock(return_value=response)

    manager = MagicMock()
    manager.get_session = AsyncMock(return_value=mock_session)
    return manager, mock_session


@pytest.fixture
def london_forecast():
    return load_fixture('openmeteo_sample_responses.json', 'london')


@pytest.fixture
def imperial_forecast():
    return load_fixture('openmeteo_sample_responses.json', 'imperial')


@pytest.fixture
def sao_paulo_geocoding():
    return load_fixture('geocoding_sample_responses.json', 'sao_paulo')


@pytest.fixture
def empty_geocoding():
    return load_fixture('geocoding_sample_responses.json', 'empty')


@pytest.fixture
def make_forecast_payload():
    """
    Factory fixture para montar respostas /forecast sintéticas

    Usage:
        def test_something(make_forecast_payload):
            data = make_forecast_payload(days=8, wind_speed=36)
    """
    def _make(
        days: int = 7,
        start_day: int = 1,
        temperature: float = 20.0,
        humidity: int = 50,
        wind_speed: float = 36.0,
        weather_code: int = 0,
        is_day: int = 1,
        wind_unit: str = 'km/h',
        temp_unit: str = '°C'
    ) -> dict:
        dates = [f"2025-03-{start_day + i:02d}" for i in range(days)]
        return {
            'latitude': 51.5,
            'longitude': -0.12,
            'current_units': {'temperature_2m': temp_unit, 'wind_speed_10m': wind_unit},
            'current': {
                'time': f"{dates[0]}T12:00" if dates else "2025-03-01T12:00",
                'temperature_2m': temperature,
                'relative_humidity_2m': humidity,
                'is_day': is_day,
                'wind_speed_10m': wind_speed,
                'weather_code': weather_code
            },
            'daily_units': {'temperature_2m_max': temp_unit, 'temperature_2m_min': temp_unit},
            'daily': {
                'time': dates,
                'weather_code': [i for i in range(days)],
                'temperature_2m_max': [20.0 + i for i in range(days)],
                'temperature_2m_min': [10.0 + i for i in range(days)]
            }
        }

    return _make


@pytest.fixture
def mock_http():
    """
    Helpers para simular o aiohttp

    Usage:
        response = mock_http.response({'results': []}, status=200)
        manager, session = mock_http.session_manager(response)
    """
    class _MockHttp:
        response = staticmethod(make_mock_response)
        session_manager = staticmethod(make_session_manager)

    return _MockHttp
