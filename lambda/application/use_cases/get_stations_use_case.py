"""
Async Use Case: Get Stations
Estações INMET dos estados monitorados (cache de 1h com fallback stale)
"""
from typing import List, Sequence

from ddtrace import tracer

from application.ports.input.use_case_ports import IGetStationsUseCase
from application.ports.output.cache_store_port import ICacheStore
from application.ports.output.station_observation_provider_port import IStationObservationProvider
from application.dtos.responses import StationsResponse
from application.services.cache_service import CacheService
from domain.constants import Cache, Monitoring
from domain.entities.station import Station

STALE_ERROR_MESSAGE = 'Using stale cache due to API error'


class GetStationsUseCase(IGetStationsUseCase):

    def __init__(
        self,
        station_provider: IStationObservationProvider,
        cache: ICacheStore,
        monitored_states: Sequence[str] = Monitoring.MONITORED_STATES
    ):
        self.station_provider = station_provider
        self.cache = cache
        self.monitored_states = set(monitored_states)

    async def _fetch_monitored(self) -> List[Station]:
        stations = await self.station_provider.get_stations()
        return [station for station in stations if station.state in self.monitored_states]

    @tracer.wrap(resource="use_case.get_stations")
    async def execute(self) -> StationsResponse:
        result = await CacheService.get_or_fetch(self.cache, Cache.KEY_STATIONS, self._fetch_monitored)
        return StationsResponse(
            stations=result.data,
            timestamp=result.timestamp,
            cached=result.cached,
            stale=result.stale,
            error=STALE_ERROR_MESSAGE if result.stale else None
        )
