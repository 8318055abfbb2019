"""
INMET Station Provider
Catálogo de estações automáticas e observações horárias (apitempo.inmet.gov.br)
"""
from datetime import datetime, timedelta
from typing import Any, List, Optional

from ddtrace import tracer
from pydantic import ValidationError

from application.ports.output.station_observation_provider_port import IStationObservationProvider
from domain.constants import API, App
from domain.entities.observation import StationObservation
from domain.entities.station import Station
from domain.exceptions import UpstreamProviderException
from infrastructure.adapters.output.http.json_fetcher import fetch_json
from infrastructure.adapters.output.providers.inmet.mappers import InmetMapper
from infrastructure.adapters.output.providers.inmet.schemas import (
    InmetObservationSchema,
    InmetStationSchema,
)
from shared.config.aiohttp_session_manager import AiohttpSessionManager, get_aiohttp_session_manager
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


def _require_list(payload: Any, what: str) -> List[Any]:
    if not isinstance(payload, list):
        raise UpstreamProviderException(
            f"INMET {what} payload is not a list",
            details={"type": type(payload).__name__}
        )
    return payload


class InmetStationProvider(IStationObservationProvider):
    """Provider para a API de estações do INMET"""

    def __init__(self, session_manager: Optional[AiohttpSessionManager] = None, base_url: str = API.INMET_BASE_URL):
        self.base_url = base_url.rstrip('/')
        self.session_manager = session_manager or get_aiohttp_session_manager()

    @property
    def provider_name(self) -> str:
        return "INMET"

    @tracer.wrap(resource="inmet.get_stations")
    async def get_stations(self) -> List[Station]:
        """
        Catálogo completo; itens inválidos são descartados com warning

        Raises:
            UpstreamProviderException: Falha HTTP/rede ou payload não-lista
        """
        url = f"{self.base_url}{API.INMET_STATIONS_PATH}"
        payload = _require_list(
            await fetch_json(self.session_manager, url, self.provider_name),
            "stations"
        )

        stations = []
        skipped = 0
        for item in payload:
            try:
                stations.append(InmetMapper.to_station(InmetStationSchema.model_validate(item)))
            except (ValidationError, ValueError) as e:
                skipped += 1
                logger.warning("Invalid INMET station skipped", error=str(e).splitlines()[0])

        logger.info("INMET stations fetched", total=len(stations), skipped=skipped)
        return stations

    @tracer.wrap(resource="inmet.get_observations")
    async def get_observations(self, station_code: str, now: datetime) -> List[StationObservation]:
        """
        Observações cobrindo as últimas 24h (a API filtra por dia UTC,
        o recorte exato da janela é feito no domínio)

        Raises:
            UpstreamProviderException: Falha HTTP/rede ou payload inválido
        """
        start = (now - timedelta(hours=App.OBSERVATION_WINDOW_HOURS)).date().isoformat()
        end = now.date().isoformat()
        url = f"{self.base_url}/estacao/{start}/{end}/{station_code}"

        payload = await fetch_json(self.session_manager, url, self.provider_name)
        if payload is None:
            # INMET responde 204/null quando a estação não tem dados no período
            return []
        payload = _require_list(payload, "observations")

        observations = []
        for item in payload:
            try:
                schema = InmetObservationSchema.model_validate(item)
                observations.append(InmetMapper.to_observation(schema, station_code))
            except (ValidationError, ValueError) as e:
                logger.warning(
                    "Invalid INMET observation skipped",
                    station=station_code,
                    error=str(e).splitlines()[0]
                )

        logger.info("INMET observations fetched", station=station_code, total=len(observations))
        return observations
