"""
Fixtures compartilhadas para testes de integração

Os providers upstream são substituídos por stubs: os testes exercitam
roteamento, validação, use cases, cache e envelope de resposta sem rede.
"""
from datetime import timedelta
from typing import Any, Dict, Optional
from unittest.mock import AsyncMock, MagicMock, patch

import json
import pytest

from domain.entities.observation import StationObservation
from infrastructure.adapters.cache.cache_registry import reset_cache_registry
from shared.utils.datetime_parser import DateTimeParser


class MockContext:
    """Mock do Lambda Context para testes locais"""
    def __init__(self):
        self.function_name = 'weather-alerts-api'
        self.function_version = '$LATEST'
        self.invoked_function_arn = 'arn:aws:lambda:sa-east-1:123456789012:function:weather-alerts-api'
        self.memory_limit_in_mb = '512'
        self.aws_request_id = 'test-request-id-12345'
        self.log_group_name = '/aws/lambda/weather-alerts-api'
        self.log_stream_name = '2025/01/15/[$LATEST]test'

    def get_remaining_time_in_millis(self):
        return 30000  # 30 segundos


@pytest.fixture
def mock_context():
    """Fixture que retorna MockContext para todos os testes"""
    return MockContext()


def build_api_gateway_event(
    method: str,
    path: str,
    resource: Optional[str] = None,
    query_parameters: Optional[Dict[str, str]] = None,
    body: Optional[Dict[str, Any]] = None
) -> Dict[str, Any]:
    """
    Builder genérico para eventos do API Gateway

    Args:
        method: HTTP method (GET, OPTIONS)
        path: Request path (/api/weather)
        resource: API Gateway resource (padrão: igual ao path)
        query_parameters: Query string params dict
        body: Request body dict (will be JSON encoded)
    """
    return {
        'resource': resource or path,
        'path': path,
        'httpMethod': method,
        'headers': {
            'Accept': 'application/json',
            'Content-Type': 'application/json'
        },
        'pathParameters': None,
        'queryStringParameters': query_parameters,
        'body': json.dumps(body) if body else None,
        'isBase64Encoded': False,
        'requestContext': {'identity': {'sourceIp': '127.0.0.1'}}
    }


def build_get_event(path: str, **query: str) -> Dict[str, Any]:
    """Builder para GET com query string (ex: build_get_event('/api/weather', station='A701'))"""
    return build_api_gateway_event('GET', path, query_parameters=query or None)


def recent_observations(code: str = 'A701', rain_last_hour: float = 0.0, rain_earlier: float = 0.0):
    """Duas observações: uma há 5 min e outra há 5h (relativas ao relógio real)"""
    now = DateTimeParser.utc_now()
    base = dict(temperature=24.0, humidity=75.0, wind_speed=8.0, wind_direction=120.0, wind_gust=18.0, pressure=925.0)
    return [
        StationObservation(station_code=code, observed_at=now - timedelta(hours=5), precipitation=rain_earlier, **base),
        StationObservation(station_code=code, observed_at=now - timedelta(minutes=5), precipitation=rain_last_hour, **base),
    ]


class StubProviderFactory:
    """Substitui WeatherProviderFactory com providers AsyncMock"""

    def __init__(self):
        self.station_provider = MagicMock()
        self.station_provider.get_observations = AsyncMock(return_value=recent_observations())
        self.station_provider.get_stations = AsyncMock(return_value=[])
        self.forecast_provider = MagicMock()
        self.geocoding_provider = MagicMock()
        self.radar_provider = MagicMock()
        self.alert_sources = []

    def get_station_provider(self):
        return self.station_provider

    def get_point_forecast_provider(self):
        return self.forecast_provider

    def get_geocoding_provider(self):
        return self.geocoding_provider

    def get_radar_provider(self):
        return self.radar_provider

    def get_alert_sources(self, catalog):
        return self.alert_sources


@pytest.fixture(autouse=True)
def fresh_caches():
    reset_cache_registry()
    yield
    reset_cache_registry()


@pytest.fixture
def providers():
    """Factory de providers stub injetada no lambda_handler"""
    factory = StubProviderFactory()
    with patch(
        'infrastructure.adapters.input.lambda_handler.get_weather_provider_factory',
        return_value=factory
    ):
        yield factory
