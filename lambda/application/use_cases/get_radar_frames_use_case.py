"""
Async Use Case: Get Radar Frames
Quadros da animação de radar (RainViewer), cache de 10 min
"""
from ddtrace import tracer

from application.ports.input.use_case_ports import IGetRadarFramesUseCase
from application.ports.output.cache_store_port import ICacheStore
from application.ports.output.radar_provider_port import IRadarProvider
from application.dtos.responses import RadarResponse
from application.services.cache_service import CacheService
from domain.constants import Cache


class GetRadarFramesUseCase(IGetRadarFramesUseCase):

    def __init__(self, radar_provider: IRadarProvider, cache: ICacheStore):
        self.radar_provider = radar_provider
        self.cache = cache

    @tracer.wrap(resource="use_case.get_radar_frames")
    async def execute(self) -> RadarResponse:
        result = await CacheService.get_or_fetch(self.cache, Cache.KEY_RADAR, self.radar_provider.get_frames)
        return RadarResponse(
            frames=result.data,
            timestamp=result.timestamp,
            cached=result.cached,
            stale=result.stale
        )
