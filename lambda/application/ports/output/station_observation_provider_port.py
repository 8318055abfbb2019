"""
Output Port: Provedor de estações e observações (INMET)
"""
from abc import ABC, abstractmethod
from datetime import datetime
from typing import List

from domain.entities.observation import StationObservation
from domain.entities.station import Station


class IStationObservationProvider(ABC):

    @abstractmethod
    async def get_stations(self) -> List[Station]:
        """
        Catálogo completo de estações automáticas

        Raises:
            UpstreamProviderException: Falha HTTP/rede ou payload inválido
        """
        pass

    @abstractmethod
    async def get_observations(self, station_code: str, now: datetime) -> List[StationObservation]:
        """
        Observações da estação cobrindo as últimas 24h até `now`

        Raises:
            UpstreamProviderException: Falha HTTP/rede ou payload inválido
        """
        pass
