"""
Async Use Case: Get Station Weather
Leitura normalizada de uma estação INMET (observações das últimas 24h)
"""
from datetime import datetime
from typing import Callable

from ddtrace import tracer

from application.ports.input.use_case_ports import IGetStationWeatherUseCase
from application.ports.output.cache_store_port import ICacheStore
from application.ports.output.station_catalog_port import IStationCatalog
from application.ports.output.station_observation_provider_port import IStationObservationProvider
from application.dtos.responses import WeatherResponse
from application.services.cache_service import CacheResult, CacheService
from domain.constants import Cache, Sources
from domain.entities.station import Station
from domain.entities.weather_reading import NormalizedWeatherReading
from domain.exceptions import StationNotFoundException, WeatherDataNotFoundException
from domain.services.weather_reading_builder import WeatherReadingBuilder
from shared.config.logger_config import get_logger
from shared.utils.datetime_parser import DateTimeParser

logger = get_logger(child=True)


class GetStationWeatherUseCase(IGetStationWeatherUseCase):
    """Async use case: reading for a single monitored station"""

    def __init__(
        self,
        catalog: IStationCatalog,
        station_provider: IStationObservationProvider,
        cache: ICacheStore,
        clock: Callable[[], datetime] = DateTimeParser.utc_now
    ):
        self.catalog = catalog
        self.station_provider = station_provider
        self.cache = cache
        self.clock = clock

    async def _fetch_reading(self, station: Station) -> NormalizedWeatherReading:
        now = self.clock()
        observations = await self.station_provider.get_observations(station.code, now)
        reading = WeatherReadingBuilder.from_observations(station, observations, now)
        if reading is None:
            raise WeatherDataNotFoundException(
                "No observations in the last 24h",
                details={"station": station.code}
            )
        return reading

    async def fetch_cached_reading(self, station: Station) -> CacheResult:
        """
        Leitura da estação via cache (TTL 5 min, fallback stale)

        Raises:
            WeatherDataNotFoundException: Estação sem observações na janela
            UpstreamProviderException: INMET falhou e não há cópia em cache
        """
        return await CacheService.get_or_fetch(
            self.cache,
            f"{Cache.PREFIX_STATION}{station.code}",
            lambda: self._fetch_reading(station)
        )

    @tracer.wrap(resource="use_case.get_station_weather")
    async def execute(self, station_code: str) -> WeatherResponse:
        station = self.catalog.get_station(station_code)
        if station is None:
            raise StationNotFoundException(
                "Station not found",
                details={"station": station_code}
            )

        result = await self.fetch_cached_reading(station)

        return WeatherResponse(
            readings=[result.data],
            source=Sources.INMET,
            timestamp=result.timestamp,
            cached=result.cached,
            stale=result.stale
        )
