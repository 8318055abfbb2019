"""
Unit Tests: Open-Meteo (forecast multi-coordenada e geocoding)
"""
from datetime import datetime, timezone

import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from domain.exceptions import UpstreamProviderException
from domain.value_objects.coordinates import Coordinates
from infrastructure.adapters.output.providers.openmeteo import OpenMeteoGeocodingProvider, OpenMeteoProvider

FORECAST_FETCH = 'infrastructure.adapters.output.providers.openmeteo.openmeteo_provider.fetch_json'
GEOCODING_FETCH = 'infrastructure.adapters.output.providers.openmeteo.openmeteo_geocoding_provider.fetch_json'


def _point(latitude=-23.55, longitude=-46.63, rain_last_hour=4.0):
    return {
        'latitude': latitude,
        'longitude': longitude,
        'utc_offset_seconds': -10800,
        'current': {
            'time': '2025-01-15T15:00',
            'temperature_2m': 27.3,
            'relative_humidity_2m': 71,
            'precipitation': 0.8,
            'wind_speed_10m': 11.2,
            'wind_direction_10m': 135,
            'wind_gusts_10m': 30.6,
            'surface_pressure': 925.1
        },
        'hourly': {
            'time': [f"2025-01-14T{h:02d}:00" for h in range(15, 24)] + [f"2025-01-15T{h:02d}:00" for h in range(16)],
            'temperature_2m': [22.0] * 24 + [27.3],
            'relative_humidity_2m': [90] * 24 + [71],
            'precipitation': [0.5] * 24 + [rain_last_hour]
        }
    }


@pytest.fixture
def provider():
    return OpenMeteoProvider(session_manager=MagicMock())


class TestOpenMeteoProvider:

    def test_build_params(self, provider):
        params = provider._build_params([Coordinates(-23.55, -46.63), Coordinates(-22.9, -43.2)])

        assert params['latitude'] == '-23.5500,-22.9000'
        assert params['longitude'] == '-46.6300,-43.2000'
        assert params['past_hours'] == 24
        assert params['forecast_hours'] == 1
        assert params['timezone'] == 'America/Sao_Paulo'
        assert 'wind_gusts_10m' in params['current']

    @pytest.mark.asyncio
    async def test_single_point(self, provider):
        with patch(FORECAST_FETCH, AsyncMock(return_value=_point())):
            forecast = await provider.get_point_forecast(Coordinates(-23.55, -46.63))

        assert forecast.observed_at == datetime(2025, 1, 15, 18, 0, tzinfo=timezone.utc)
        assert forecast.wind_gust == 30.6
        assert forecast.hourly_precipitation[-1] == 4.0
        assert len(forecast.hourly_precipitation) == 25

    @pytest.mark.asyncio
    async def test_multiple_points_keep_order(self, provider):
        payload = [_point(-23.55, -46.63, 1.0), _point(-22.9, -43.2, 9.0)]

        with patch(FORECAST_FETCH, AsyncMock(return_value=payload)):
            forecasts = await provider.get_point_forecasts([Coordinates(-23.55, -46.63), Coordinates(-22.9, -43.2)])

        assert [f.hourly_precipitation[-1] for f in forecasts] == [1.0, 9.0]

    @pytest.mark.asyncio
    async def test_count_mismatch(self, provider):
        with patch(FORECAST_FETCH, AsyncMock(return_value=_point())):
            with pytest.raises(UpstreamProviderException):
                await provider.get_point_forecasts([Coordinates(0, 0), Coordinates(1, 1)])

    @pytest.mark.asyncio
    async def test_invalid_payload(self, provider):
        with patch(FORECAST_FETCH, AsyncMock(return_value={'latitude': 0})):
            with pytest.raises(UpstreamProviderException, match="validation"):
                await provider.get_point_forecast(Coordinates(0, 0))

    @pytest.mark.asyncio
    async def test_too_many_coordinates(self, provider):
        with pytest.raises(ValueError):
            await provider.get_point_forecasts([Coordinates(0, 0)] * 51)

    @pytest.mark.asyncio
    async def test_empty_request(self, provider):
        assert await provider.get_point_forecasts([]) == []


class TestOpenMeteoGeocodingProvider:

    @pytest.mark.asyncio
    async def test_search(self):
        payload = {'results': [{
            'name': 'Campinas', 'latitude': -22.9, 'longitude': -47.06,
            'country': 'Brasil', 'country_code': 'BR', 'admin1': 'São Paulo',
            'population': 1213792, 'elevation': 685.0
        }]}
        geocoding = OpenMeteoGeocodingProvider(session_manager=MagicMock())

        with patch(GEOCODING_FETCH, AsyncMock(return_value=payload)) as fetch:
            results = await geocoding.search('Campinas, SP, Brasil')

        assert fetch.call_args.kwargs['params']['name'] == 'Campinas, SP, Brasil'
        assert fetch.call_args.kwargs['params']['language'] == 'pt'
        assert results[0].state == 'São Paulo'
        assert results[0].is_brazilian

    @pytest.mark.asyncio
    async def test_no_results_key(self):
        geocoding = OpenMeteoGeocodingProvider(session_manager=MagicMock())

        with patch(GEOCODING_FETCH, AsyncMock(return_value={'generationtime_ms': 0.5})):
            assert await geocoding.search('Xyzzy, Brasil') == []
