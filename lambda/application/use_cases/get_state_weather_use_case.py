"""
Async Use Case: Get State Weather
Todas as estações automáticas de um estado: catálogo INMET + uma chamada
Open-Meteo multi-coordenada
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, List, Tuple

from ddtrace import tracer

from application.ports.input.use_case_ports import IGetStateWeatherUseCase
from application.ports.output.cache_store_port import ICacheStore
from application.ports.output.point_forecast_provider_port import IPointForecastProvider
from application.ports.output.station_catalog_port import IStationCatalog
from application.ports.output.station_observation_provider_port import IStationObservationProvider
from application.dtos.responses import StateWeatherResponse
from application.services.cache_service import CacheService
from domain.constants import API, Cache, Sources
from domain.entities.station import Station
from domain.entities.weather_reading import NormalizedWeatherReading
from domain.exceptions import InvalidParameterException, WeatherDataNotFoundException
from domain.services.weather_reading_builder import WeatherReadingBuilder
from shared.config.logger_config import get_logger
from shared.utils.datetime_parser import DateTimeParser

logger = get_logger(child=True)


@dataclass(frozen=True)
class StateWeatherSnapshot:
    readings: Tuple[NormalizedWeatherReading, ...]
    total_stations_in_state: int


class GetStateWeatherUseCase(IGetStateWeatherUseCase):

    def __init__(
        self,
        catalog: IStationCatalog,
        station_provider: IStationObservationProvider,
        forecast_provider: IPointForecastProvider,
        state_cache: ICacheStore,
        metadata_cache: ICacheStore,
        clock: Callable[[], datetime] = DateTimeParser.utc_now
    ):
        self.catalog = catalog
        self.station_provider = station_provider
        self.forecast_provider = forecast_provider
        self.state_cache = state_cache
        self.metadata_cache = metadata_cache
        self.clock = clock

    async def _automatic_stations(self, state_code: str) -> List[Station]:
        # Catálogo completo do INMET em cache de 24h (com fallback stale)
        catalog = await CacheService.get_or_fetch(
            self.metadata_cache,
            Cache.KEY_STATION_METADATA,
            self.station_provider.get_stations
        )
        return [
            station for station in catalog.data
            if station.state == state_code and station.is_automatic
        ]

    async def _build_snapshot(self, state_code: str) -> StateWeatherSnapshot:
        stations = await self._automatic_stations(state_code)
        if not stations:
            raise WeatherDataNotFoundException(
                f"No stations found for state {state_code}",
                details={"state": state_code}
            )

        located = [station for station in stations if station.coordinates is not None]
        selected = located[:API.OPENMETEO_MAX_STATIONS]
        if len(located) > len(selected):
            logger.info(
                "State stations truncated",
                state=state_code,
                total=len(located),
                selected=len(selected)
            )

        forecasts = await self.forecast_provider.get_point_forecasts(
            [station.coordinates for station in selected]
        )

        now = self.clock()
        readings = tuple(
            WeatherReadingBuilder.from_point_forecast(
                station_id=station.code,
                station_name=station.name,
                state=station.state,
                forecast=forecast,
                now=now,
                coordinates=station.coordinates,
                broken=station.is_broken
            )
            for station, forecast in zip(selected, forecasts)
        )

        return StateWeatherSnapshot(readings=readings, total_stations_in_state=len(stations))

    @tracer.wrap(resource="use_case.get_state_weather")
    async def execute(self, state_code: str) -> StateWeatherResponse:
        state_code = state_code.upper()
        if self.catalog.get_state(state_code) is None:
            raise InvalidParameterException(
                f"Invalid state code: {state_code}",
                details={"state": state_code}
            )

        result = await CacheService.get_or_fetch(
            self.state_cache,
            f"{Cache.PREFIX_STATE}{state_code}",
            lambda: self._build_snapshot(state_code)
        )
        snapshot: StateWeatherSnapshot = result.data

        return StateWeatherResponse(
            readings=list(snapshot.readings),
            total_stations_in_state=snapshot.total_stations_in_state,
            state=state_code,
            source=Sources.OPEN_METEO,
            stations_source=Sources.INMET_STATIONS,
            timestamp=result.timestamp,
            cached=result.cached,
            stale=result.stale
        )
