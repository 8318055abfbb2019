"""
Open-Meteo Geocoding Provider
"""
from typing import List, Optional

from ddtrace import tracer
from pydantic import ValidationError

from application.ports.output.geocoding_provider_port import IGeocodingProvider
from domain.constants import API
from domain.entities.location import GeocodedLocation
from domain.exceptions import UpstreamProviderException
from infrastructure.adapters.output.http.json_fetcher import fetch_json
from infrastructure.adapters.output.providers.openmeteo.mappers import OpenMeteoDataMapper
from infrastructure.adapters.output.providers.openmeteo.schemas import OpenMeteoGeocodingSchema
from shared.config.aiohttp_session_manager import AiohttpSessionManager, get_aiohttp_session_manager


class OpenMeteoGeocodingProvider(IGeocodingProvider):

    RESULT_COUNT = 5
    LANGUAGE = 'pt'

    def __init__(self, session_manager: Optional[AiohttpSessionManager] = None, url: str = API.OPENMETEO_GEOCODING_URL):
        self.url = url
        self.session_manager = session_manager or get_aiohttp_session_manager()

    @tracer.wrap(resource="openmeteo.geocode")
    async def search(self, query: str) -> List[GeocodedLocation]:
        params = {
            'name': query,
            'count': self.RESULT_COUNT,
            'language': self.LANGUAGE,
            'format': 'json'
        }
        payload = await fetch_json(self.session_manager, self.url, "Open-Meteo geocoding", params=params)

        try:
            schema = OpenMeteoGeocodingSchema.model_validate(payload or {})
        except ValidationError as e:
            raise UpstreamProviderException(
                "Open-Meteo geocoding payload failed validation",
                details={"error": str(e).splitlines()[0]}
            ) from e

        return [OpenMeteoDataMapper.map_geocoding_result(result) for result in schema.results]
