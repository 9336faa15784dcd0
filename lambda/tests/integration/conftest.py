"""
Fixtures compartilhadas para testes de integração
O lambda_handler roda de ponta a ponta; só o HTTP do aiohttp é simulado
"""
import json
from pathlib import Path
from typing import Any, Dict, Optional
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from infrastructure.adapters.output.providers.weather_provider_factory import WeatherProviderFactory

FIXTURES_PATH = Path(__file__).parent.parent / 'fixtures'


class MockContext:
    """Mock do Lambda Context para testes locais"""
    def __init__(self):
        self.function_name = 'weatherdesk-backend'
        self.function_version = '$LATEST'
        self.invoked_function_arn = 'arn:aws:lambda:us-east-1:123456789012:function:weatherdesk-backend'
        self.memory_limit_in_mb = '256'
        self.aws_request_id = 'test-request-id-12345'
        self.log_group_name = '/aws/lambda/weatherdesk-backend'
        self.log_stream_name = '2025/06/02/[$LATEST]test'

    def get_remaining_time_in_millis(self):
        return 30000  # 30 segundos


@pytest.fixture
def mock_context():
    """Fixture que retorna MockContext para todos os testes"""
    return MockContext()


def build_api_gateway_event(
    method: str,
    path: str,
    resource: str,
    query_parameters: Optional[Dict[str, str]] = None
) -> Dict[str, Any]:
    """
    Builder genérico para eventos do API Gateway (REST v1)

    Args:
        method: HTTP method
        path: Request path (/weather)
        resource: API Gateway resource
        query_parameters: Query string params dict
    """
    return {
        'resource': resource,
        'path': path,
        'httpMethod': method,
        'headers': {
            'Accept': '*/*',
            'User-Agent': 'pytest'
        },
        'pathParameters': None,
        'queryStringParameters': query_parameters,
        'body': None,
        'isBase64Encoded': False
    }


def build_weather_event(**query) -> Dict[str, Any]:
    """Builder para GET /weather?latitude=..&longitude=.."""
    return build_api_gateway_event('GET', '/weather', '/weather', query_parameters=query or None)


def build_city_weather_event(**query) -> Dict[str, Any]:
    """Builder para GET /weather/city?name=.."""
    return build_api_gateway_event('GET', '/weather/city', '/weather/city', query_parameters=query or None)


def load_fixture(file_name: str, key: str) -> dict:
    with open(FIXTURES_PATH / file_name, 'r', encoding='utf-8') as f:
        return json.load(f)[key]


def _mock_response(payload=None, status: int = 200):
    response = AsyncMock()
    response.status = status
    response.json = AsyncMock(return_value=payload)
    response.text = AsyncMock(return_value='upstream error')
    response.__aenter__ = AsyncMock(return_value=response)
    response.__aexit__ = AsyncMock(return_value=False)
    return response


class FakeUpstream:
    """
    Upstream Open-Meteo falso, roteado pela URL

    Cada rota aceita um payload (dict), um status HTTP (int) ou uma exceção.
    """

    def __init__(self):
        self.forecast = load_fixture('openmeteo_sample_responses.json', 'london')
        self.geocoding = load_fixture('geocoding_sample_responses.json', 'sao_paulo')
        self.calls = []

    def _reply(self, outcome):
        if isinstance(outcome, BaseException):
            raise outcome
        if isinstance(outcome, int):
            return _mock_response(status=outcome)
        return _mock_response(outcome)

    def get(self, url, params=None):
        self.calls.append((url, params))
        if url.endswith('/search'):
            return self._reply(self.geocoding)
        return self._reply(self.forecast)

    def session_manager(self):
        session = MagicMock()
        session.get = MagicMock(side_effect=self.get)
        manager = MagicMock()
        manager.get_session = AsyncMock(return_value=session)
        return manager


@pytest.fixture
def upstream():
    """
    Substitui a factory de providers por uma que usa o FakeUpstream

    Usage:
        def test_x(upstream, mock_context):
            upstream.forecast = 503
    """
    fake = FakeUpstream()
    factory = WeatherProviderFactory(session_manager=fake.session_manager())
    with patch(
        'infrastructure.adapters.input.lambda_handler.get_weather_provider_factory',
        return_value=factory
    ):
        yield fake


@pytest.fixture
def weather_event():
    """Builder de eventos GET /weather"""
    return build_weather_event


@pytest.fixture
def city_weather_event():
    """Builder de eventos GET /weather/city"""
    return build_city_weather_event
