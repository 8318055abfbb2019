"""
Async Use Case: Get Coordinates Weather
Leitura de modelo (Open-Meteo) para uma coordenada arbitrária
"""
from datetime import datetime
from typing import Callable

from ddtrace import tracer

from application.ports.input.use_case_ports import IGetCoordinatesWeatherUseCase
from application.ports.output.cache_store_port import ICacheStore
from application.ports.output.point_forecast_provider_port import IPointForecastProvider
from application.dtos.responses import WeatherResponse
from application.services.cache_service import CacheService
from domain.constants import Cache, Sources
from domain.entities.weather_reading import NormalizedWeatherReading
from domain.services.weather_reading_builder import WeatherReadingBuilder
from domain.value_objects.coordinates import Coordinates
from shared.utils.datetime_parser import DateTimeParser

CUSTOM_LOCATION_ID = 'custom'
CUSTOM_LOCATION_NAME = 'Localização Personalizada'


class GetCoordinatesWeatherUseCase(IGetCoordinatesWeatherUseCase):

    def __init__(
        self,
        forecast_provider: IPointForecastProvider,
        cache: ICacheStore,
        clock: Callable[[], datetime] = DateTimeParser.utc_now
    ):
        self.forecast_provider = forecast_provider
        self.cache = cache
        self.clock = clock

    async def _fetch_reading(self, coordinates: Coordinates) -> NormalizedWeatherReading:
        forecast = await self.forecast_provider.get_point_forecast(coordinates)
        return WeatherReadingBuilder.from_point_forecast(
            station_id=CUSTOM_LOCATION_ID,
            station_name=CUSTOM_LOCATION_NAME,
            state='',
            forecast=forecast,
            now=self.clock(),
            coordinates=coordinates
        )

    @tracer.wrap(resource="use_case.get_coordinates_weather")
    async def execute(self, coordinates: Coordinates) -> WeatherResponse:
        result = await CacheService.get_or_fetch(
            self.cache,
            f"{Cache.PREFIX_COORDINATES}{coordinates.cache_key()}",
            lambda: self._fetch_reading(coordinates)
        )
        return WeatherResponse(
            readings=[result.data],
            source=Sources.OPEN_METEO,
            timestamp=result.timestamp,
            cached=result.cached,
            stale=result.stale
        )
