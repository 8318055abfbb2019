"""
Async Use Case: Get Capital Weather
Leituras de todas as estações monitoradas de uma capital (lotes de 5)
"""
from typing import List, Optional

from ddtrace import tracer

from application.ports.input.use_case_ports import IGetCapitalWeatherUseCase
from application.ports.output.station_catalog_port import IStationCatalog
from application.dtos.responses import WeatherResponse
from application.services.batching import gather_in_batches
from application.services.cache_service import CacheResult
from application.use_cases.get_station_weather_use_case import GetStationWeatherUseCase
from domain.constants import Monitoring, Sources
from domain.exceptions import (
    CapitalNotFoundException,
    UpstreamProviderException,
    WeatherDataNotFoundException,
)
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class GetCapitalWeatherUseCase(IGetCapitalWeatherUseCase):
    """
    Capital por slug, capital do estado informado, ou São Paulo por padrão

    Estações sem dados (ou com falha no upstream sem cópia em cache)
    são omitidas da resposta.
    """

    def __init__(self, catalog: IStationCatalog, station_weather: GetStationWeatherUseCase):
        self.catalog = catalog
        self.station_weather = station_weather

    def _resolve(self, capital_slug: Optional[str], state_code: Optional[str]):
        if capital_slug:
            capital = self.catalog.get_capital(capital_slug)
            if capital is None:
                raise CapitalNotFoundException(
                    "Capital not found",
                    details={"capital": capital_slug}
                )
            return capital, capital.to_location_response()

        if state_code:
            state = self.catalog.get_state(state_code)
            capital = self.catalog.get_capital_by_state(state_code)
            if state is None or capital is None:
                raise CapitalNotFoundException(
                    "Capital not found for state",
                    details={"state": state_code}
                )
            return capital, state.to_location_response()

        capital = self.catalog.get_capital(Monitoring.DEFAULT_CAPITAL)
        return capital, capital.to_location_response()

    @tracer.wrap(resource="use_case.get_capital_weather")
    async def execute(self, capital_slug: Optional[str] = None, state_code: Optional[str] = None) -> WeatherResponse:
        capital, location = self._resolve(capital_slug, state_code)
        stations = self.catalog.stations_for_capital(capital.slug)

        outcomes = await gather_in_batches(
            stations,
            self.station_weather.fetch_cached_reading,
            return_exceptions=True
        )

        results: List[CacheResult] = []
        upstream_failures = 0
        for station, outcome in zip(stations, outcomes):
            if isinstance(outcome, UpstreamProviderException):
                upstream_failures += 1
                logger.warning("Station dropped after upstream failure", station=station.code, error=outcome.message)
            elif isinstance(outcome, WeatherDataNotFoundException):
                logger.info("Station dropped without data", station=station.code)
            elif isinstance(outcome, BaseException):
                raise outcome
            else:
                results.append(outcome)

        if not results:
            if stations and upstream_failures == len(stations):
                raise UpstreamProviderException(
                    "Failed to fetch weather data",
                    details={"capital": capital.slug}
                )
            raise WeatherDataNotFoundException(
                "No station data available",
                details={"capital": capital.slug}
            )

        return WeatherResponse(
            readings=[result.data for result in results],
            source=Sources.INMET,
            timestamp=min(result.timestamp for result in results),
            location=location,
            cached=all(result.cached for result in results),
            stale=any(result.stale for result in results)
        )
