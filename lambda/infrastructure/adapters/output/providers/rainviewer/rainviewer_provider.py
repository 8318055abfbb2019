"""
RainViewer Provider - Lista de quadros de radar (passado + nowcast)
"""
from typing import Optional

from ddtrace import tracer
from pydantic import ValidationError

from application.ports.output.radar_provider_port import IRadarProvider
from domain.constants import API
from domain.entities.radar import RadarFrame, RadarFrames
from domain.exceptions import UpstreamProviderException
from infrastructure.adapters.output.http.json_fetcher import fetch_json
from infrastructure.adapters.output.providers.rainviewer.schemas import RainViewerMapsSchema
from shared.config.aiohttp_session_manager import AiohttpSessionManager, get_aiohttp_session_manager


class RainViewerProvider(IRadarProvider):

    def __init__(self, session_manager: Optional[AiohttpSessionManager] = None, url: str = API.RAINVIEWER_MAPS_URL):
        self.url = url
        self.session_manager = session_manager or get_aiohttp_session_manager()

    @tracer.wrap(resource="rainviewer.get_frames")
    async def get_frames(self) -> RadarFrames:
        payload = await fetch_json(self.session_manager, self.url, "RainViewer")

        try:
            schema = RainViewerMapsSchema.model_validate(payload)
        except ValidationError as e:
            raise UpstreamProviderException(
                "RainViewer payload failed validation",
                details={"error": str(e).splitlines()[0]}
            ) from e

        return RadarFrames(
            host=schema.host.rstrip('/'),
            generated=schema.generated,
            past=[RadarFrame(time=f.time, path=f.path) for f in schema.radar.past],
            nowcast=[RadarFrame(time=f.time, path=f.path) for f in schema.radar.nowcast]
        )
