"""
Testes de integração do Lambda - Weather Alerts API
Organizados em classes pytest por endpoint
Executar: pytest lambda/tests/integration/test_lambda_integration.py -v
"""
import json
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest

from domain.alerts.primitives import AlertLevel, AlertType
from domain.entities.alert import AlertRecord
from domain.entities.location import GeocodedLocation
from domain.entities.point_forecast import PointForecast
from domain.entities.radar import RadarFrame, RadarFrames
from domain.entities.station import Station
from domain.exceptions import UpstreamProviderException
from domain.value_objects.coordinates import Coordinates
from infrastructure.adapters.input.lambda_handler import lambda_handler
from shared.utils.datetime_parser import DateTimeParser
from tests.integration.assertions import assert_200_ok, assert_error, assert_reading_structure
from tests.integration.conftest import build_api_gateway_event, build_get_event, recent_observations

pytestmark = pytest.mark.integration


def _point_forecast(rain_last_hour: float = 0.0) -> PointForecast:
    return PointForecast(
        latitude=-23.55,
        longitude=-46.63,
        observed_at=DateTimeParser.utc_now(),
        precipitation=rain_last_hour,
        temperature=26.0,
        humidity=70.0,
        wind_speed=10.0,
        wind_direction=90.0,
        wind_gust=20.0,
        pressure=925.0,
        hourly_precipitation=tuple([0.0] * 24 + [rain_last_hour]),
        hourly_temperature=(22.0, 26.0),
        hourly_humidity=(70.0, 90.0)
    )


def _alert_source(name, **kwargs):
    source = MagicMock()
    source.name = name
    source.fetch_alerts = AsyncMock(**kwargs)
    return source


class TestWeatherEndpoint:
    """Testes do endpoint GET /api/weather"""

    def test_station(self, mock_context, providers):
        providers.station_provider.get_observations.return_value = recent_observations(rain_last_hour=35.0, rain_earlier=25.0)

        response = lambda_handler(build_get_event('/api/weather', station='a701'), mock_context)

        body = assert_200_ok(response)
        assert body['total'] == 1
        assert body['source'] == 'INMET'
        reading = body['data'][0]
        assert_reading_structure(reading)
        assert reading['stationId'] == 'A701'
        assert reading['alertLevel'] == 'severe'
        assert reading['status'] == 'online'
        assert 'cached' not in body

    def test_station_second_request_is_cached(self, mock_context, providers):
        event = build_get_event('/api/weather', station='A701')

        lambda_handler(event, mock_context)
        body = assert_200_ok(lambda_handler(event, mock_context))

        assert body['cached'] is True
        assert providers.station_provider.get_observations.await_count == 1

    def test_unknown_station(self, mock_context, providers):
        response = lambda_handler(build_get_event('/api/weather', station='Z999'), mock_context)

        assert_error(response, 404, 'StationNotFoundException')

    def test_malformed_station(self, mock_context, providers):
        response = lambda_handler(build_get_event('/api/weather', station='701'), mock_context)

        assert_error(response, 400, 'InvalidParameterException')

    def test_default_is_sao_paulo(self, mock_context, providers):
        body = assert_200_ok(lambda_handler(build_get_event('/api/weather'), mock_context))

        assert [r['stationId'] for r in body['data']] == ['A701', 'A713']
        assert body['location']['name'] == 'São Paulo'
        assert body['location']['type'] == 'capital'

    def test_capital(self, mock_context, providers):
        body = assert_200_ok(lambda_handler(build_get_event('/api/weather', capital='rio-de-janeiro'), mock_context))

        assert [r['stationId'] for r in body['data']] == ['A652', 'A621']

    def test_unknown_capital(self, mock_context, providers):
        response = lambda_handler(build_get_event('/api/weather', capital='atlantida'), mock_context)

        assert_error(response, 404, 'CapitalNotFoundException')

    def test_state(self, mock_context, providers):
        body = assert_200_ok(lambda_handler(build_get_event('/api/weather', state='pr'), mock_context))

        assert body['location']['type'] == 'state'
        assert body['location']['code'] == 'PR'

    def test_station_takes_precedence_over_capital(self, mock_context, providers):
        event = build_get_event('/api/weather', station='A652', capital='sao-paulo')

        body = assert_200_ok(lambda_handler(event, mock_context))

        assert [r['stationId'] for r in body['data']] == ['A652']

    def test_coordinates(self, mock_context, providers):
        providers.forecast_provider.get_point_forecast = AsyncMock(return_value=_point_forecast(22.0))

        body = assert_200_ok(lambda_handler(build_get_event('/api/weather', lat='-23.55', lng='-46.63'), mock_context))

        reading = body['data'][0]
        assert body['source'] == 'open-meteo'
        assert reading['stationId'] == 'custom'
        assert reading['alertLevel'] == 'alert'

    @pytest.mark.parametrize("query", [{'lat': '-23.55'}, {'lat': 'abc', 'lng': '1'}, {'lat': '95', 'lng': '1'}])
    def test_invalid_coordinates(self, mock_context, providers, query):
        response = lambda_handler(build_get_event('/api/weather', **query), mock_context)

        assert_error(response, 400, 'InvalidParameterException')

    def test_upstream_failure_without_cache(self, mock_context, providers):
        providers.station_provider.get_observations.side_effect = UpstreamProviderException("INMET returned HTTP 503")

        response = lambda_handler(build_get_event('/api/weather', station='A701'), mock_context)

        body = assert_error(response, 500, 'UpstreamProviderException')
        assert body['error'] == 'Failed to fetch upstream data'

    def test_cors_headers(self, mock_context, providers):
        response = lambda_handler(build_get_event('/api/weather', station='A701'), mock_context)

        assert response['headers']['Access-Control-Allow-Origin'] == '*'
        assert response['headers']['Access-Control-Allow-Methods'] == 'GET,OPTIONS'


class TestWeatherStateEndpoint:
    """Testes do endpoint GET /api/weather-state"""

    def test_state_stations(self, mock_context, providers):
        providers.station_provider.get_stations.return_value = [
            Station(code='A701', name='SAO PAULO - MIRANTE', state='SP',
                    coordinates=Coordinates(-23.49, -46.62), situation='Operante', station_type='Automatica'),
            Station(code='A771', name='SAO PAULO - INTERLAGOS', state='SP',
                    coordinates=Coordinates(-23.72, -46.67), situation='Pane', station_type='Automatica'),
        ]
        providers.forecast_provider.get_point_forecasts = AsyncMock(
            side_effect=lambda coords: [_point_forecast(12.0) for _ in coords]
        )

        body = assert_200_ok(lambda_handler(build_get_event('/api/weather-state', state='SP'), mock_context))

        assert body['state'] == 'SP'
        assert body['totalStationsInState'] == 2
        assert body['stationsSource'] == 'inmet'
        assert [r['status'] for r in body['data']] == ['online', 'offline']
        assert {r['alertLevel'] for r in body['data']} == {'attention'}

    def test_missing_state(self, mock_context, providers):
        response = lambda_handler(build_get_event('/api/weather-state'), mock_context)

        assert_error(response, 400, 'InvalidParameterException')

    def test_unknown_state(self, mock_context, providers):
        response = lambda_handler(build_get_event('/api/weather-state', state='XX'), mock_context)

        assert_error(response, 400, 'InvalidParameterException')


class TestStationsEndpoint:
    """Testes do endpoint GET /api/stations"""

    def test_monitored_stations(self, mock_context, providers):
        providers.station_provider.get_stations.return_value = [
            Station(code='A701', name='SAO PAULO - MIRANTE', state='SP', station_type='Automatica'),
            Station(code='A101', name='MANAUS', state='AM', station_type='Automatica'),
        ]

        body = assert_200_ok(lambda_handler(build_get_event('/api/stations'), mock_context))

        assert body['total'] == 1
        assert body['data'][0]['code'] == 'A701'
        assert body['cached'] is False

    def test_upstream_failure_without_cache(self, mock_context, providers):
        providers.station_provider.get_stations.side_effect = UpstreamProviderException("INMET returned HTTP 500")

        response = lambda_handler(build_get_event('/api/stations'), mock_context)

        assert_error(response, 500, 'UpstreamProviderException')


class TestAlertsEndpoint:
    """Testes do endpoint GET /api/alerts"""

    def test_sorted_alerts_with_summary(self, mock_context, providers):
        providers.alert_sources = [
            _alert_source('inmet', return_value=[
                AlertRecord(id='1', region='SP', level=AlertLevel.ATTENTION, type=AlertType.RAIN,
                            message='Chuvas', start_time='2025-01-15T12:00:00Z', source='INMET'),
                AlertRecord(id='2', region='RJ', level=AlertLevel.SEVERE, type=AlertType.FLOOD,
                            message='Alagamentos', start_time='2025-01-15T12:00:00Z', source='INMET'),
            ]),
            _alert_source('weather-feed', return_value=[]),
        ]

        body = assert_200_ok(lambda_handler(build_get_event('/api/alerts'), mock_context))

        assert [a['id'] for a in body['data']] == ['2', '1']
        assert body['summary'] == {'severe': 1, 'alert': 0, 'attention': 1}

    def test_no_alerts(self, mock_context, providers):
        providers.alert_sources = [_alert_source('inmet', return_value=[])]

        body = assert_200_ok(lambda_handler(build_get_event('/api/alerts'), mock_context))

        assert body['data'] == []
        assert body['total'] == 0


class TestGeocodeEndpoint:
    """Testes do endpoint GET /api/geocode"""

    def test_brazilian_city(self, mock_context, providers):
        providers.geocoding_provider.search = AsyncMock(return_value=[
            GeocodedLocation(name='Campinas', state='São Paulo', country='Brasil',
                             coordinates=Coordinates(-22.9, -47.06), country_code='BR')
        ])

        body = assert_200_ok(lambda_handler(build_get_event('/api/geocode', city='Campinas', state='SP'), mock_context))

        assert body['query'] == 'Campinas, SP, Brasil'
        assert body['results'][0]['name'] == 'Campinas'

    def test_q_alias(self, mock_context, providers):
        providers.geocoding_provider.search = AsyncMock(return_value=[
            GeocodedLocation(name='Santos', state='São Paulo', country='Brasil',
                             coordinates=Coordinates(-23.96, -46.33), country_code='BR')
        ])

        body = assert_200_ok(lambda_handler(build_get_event('/api/geocode', q='Santos'), mock_context))

        assert body['query'] == 'Santos, Brasil'

    def test_not_found(self, mock_context, providers):
        providers.geocoding_provider.search = AsyncMock(return_value=[])

        response = lambda_handler(build_get_event('/api/geocode', city='Xyzzy'), mock_context)

        body = assert_error(response, 404, 'LocationNotFoundException')
        assert body['results'] == []

    def test_missing_city(self, mock_context, providers):
        response = lambda_handler(build_get_event('/api/geocode'), mock_context)

        assert_error(response, 400, 'InvalidParameterException')


class TestRadarEndpoint:
    """Testes do endpoint GET /api/radar"""

    def test_frames(self, mock_context, providers):
        providers.radar_provider.get_frames = AsyncMock(return_value=RadarFrames(
            host='https://tilecache.rainviewer.com',
            generated=int(datetime(2025, 1, 15, tzinfo=timezone.utc).timestamp()),
            past=[RadarFrame(1736900000, '/v2/radar/a')]
        ))

        body = assert_200_ok(lambda_handler(build_get_event('/api/radar'), mock_context))

        assert body['data']['latestIndex'] == 0
        assert body['data']['past'][0]['tileUrl'].endswith('/256/{z}/{x}/{y}/2/1_1.png')


class TestRouting:

    def test_unknown_route(self, mock_context, providers):
        response = lambda_handler(build_api_gateway_event('GET', '/api/unknown'), mock_context)

        assert response['statusCode'] == 404
        assert json.loads(response['body'])
