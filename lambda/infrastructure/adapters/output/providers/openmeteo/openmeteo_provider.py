"""
Open-Meteo Provider - Condições atuais + série horária das últimas 24h
Suporta um ponto ou várias coordenadas em uma única chamada
"""
from typing import Any, Dict, List, Optional, Sequence

from ddtrace import tracer
from pydantic import ValidationError

from application.ports.output.point_forecast_provider_port import IPointForecastProvider
from domain.constants import API, App
from domain.entities.point_forecast import PointForecast
from domain.exceptions import UpstreamProviderException
from domain.value_objects.coordinates import Coordinates
from infrastructure.adapters.output.http.json_fetcher import fetch_json
from infrastructure.adapters.output.providers.openmeteo.mappers import OpenMeteoDataMapper
from infrastructure.adapters.output.providers.openmeteo.schemas import OpenMeteoForecastSchema
from shared.config.aiohttp_session_manager import AiohttpSessionManager, get_aiohttp_session_manager
from shared.config.logger_config import get_logger

logger = get_logger(child=True)

CURRENT_VARIABLES = (
    'temperature_2m',
    'relative_humidity_2m',
    'precipitation',
    'rain',
    'weather_code',
    'wind_speed_10m',
    'wind_direction_10m',
    'wind_gusts_10m',
    'surface_pressure'
)

HOURLY_VARIABLES = (
    'temperature_2m',
    'relative_humidity_2m',
    'precipitation',
    'rain'
)


def _format_coordinate(value: float) -> str:
    return f"{value:.4f}"


class OpenMeteoProvider(IPointForecastProvider):
    """
    Provider Open-Meteo (sem chave de API)

    Sempre pede past_hours=24 e forecast_hours=1: a série horária termina
    na hora corrente e o domínio soma os últimos 24 elementos.
    """

    def __init__(self, session_manager: Optional[AiohttpSessionManager] = None, url: str = API.OPENMETEO_FORECAST_URL):
        self.url = url
        self.session_manager = session_manager or get_aiohttp_session_manager()

    @property
    def provider_name(self) -> str:
        return "Open-Meteo"

    def _build_params(self, coordinates: Sequence[Coordinates]) -> Dict[str, Any]:
        return {
            'latitude': ','.join(_format_coordinate(c.latitude) for c in coordinates),
            'longitude': ','.join(_format_coordinate(c.longitude) for c in coordinates),
            'current': ','.join(CURRENT_VARIABLES),
            'hourly': ','.join(HOURLY_VARIABLES),
            'timezone': App.TIMEZONE,
            'past_hours': API.OPENMETEO_PAST_HOURS,
            'forecast_hours': 1
        }

    def _parse(self, payload: Any, expected: int) -> List[PointForecast]:
        # Uma coordenada -> objeto; várias -> lista na ordem pedida
        items = payload if isinstance(payload, list) else [payload]
        if len(items) != expected:
            raise UpstreamProviderException(
                "Open-Meteo returned unexpected number of locations",
                details={"expected": expected, "received": len(items)}
            )

        try:
            return [
                OpenMeteoDataMapper.map_point_forecast(OpenMeteoForecastSchema.model_validate(item))
                for item in items
            ]
        except (ValidationError, ValueError) as e:
            raise UpstreamProviderException(
                "Open-Meteo payload failed validation",
                details={"error": str(e).splitlines()[0]}
            ) from e

    @tracer.wrap(resource="openmeteo.get_point_forecast")
    async def get_point_forecast(self, coordinates: Coordinates) -> PointForecast:
        forecasts = await self.get_point_forecasts([coordinates])
        return forecasts[0]

    @tracer.wrap(resource="openmeteo.get_point_forecasts")
    async def get_point_forecasts(self, coordinates: Sequence[Coordinates]) -> List[PointForecast]:
        """
        Raises:
            ValueError: Mais coordenadas que o limite por chamada
            UpstreamProviderException: Falha HTTP/rede ou payload inválido
        """
        coordinates = list(coordinates)
        if not coordinates:
            return []
        if len(coordinates) > API.OPENMETEO_MAX_STATIONS:
            raise ValueError(
                f"At most {API.OPENMETEO_MAX_STATIONS} coordinates per call, got {len(coordinates)}"
            )

        payload = await fetch_json(
            self.session_manager,
            self.url,
            self.provider_name,
            params=self._build_params(coordinates)
        )
        forecasts = self._parse(payload, expected=len(coordinates))

        logger.info("Open-Meteo forecasts fetched", total=len(forecasts))
        return forecasts


# Factory singleton
_provider_instance = None


def get_openmeteo_provider() -> OpenMeteoProvider:
    """
    Factory para obter singleton do provider
    Reutiliza entre invocações Lambda (warm starts)
    """
    global _provider_instance

    if _provider_instance is None:
        _provider_instance = OpenMeteoProvider()

    return _provider_instance
