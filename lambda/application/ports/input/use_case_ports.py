"""
Input Ports: Interfaces dos casos de uso expostos pela camada HTTP
"""
from abc import ABC, abstractmethod
from typing import Optional

from application.dtos.requests import GeocodeRequest
from application.dtos.responses import (
    AlertsResponse,
    GeocodeResponse,
    RadarResponse,
    StateWeatherResponse,
    StationsResponse,
    WeatherResponse,
)
from domain.value_objects.coordinates import Coordinates


class IGetStationWeatherUseCase(ABC):

    @abstractmethod
    async def execute(self, station_code: str) -> WeatherResponse:
        """
        Raises:
            StationNotFoundException: Código fora do catálogo monitorado
            WeatherDataNotFoundException: Estação sem observações nas últimas 24h
        """
        pass


class IGetCapitalWeatherUseCase(ABC):

    @abstractmethod
    async def execute(self, capital_slug: Optional[str] = None, state_code: Optional[str] = None) -> WeatherResponse:
        """
        Raises:
            CapitalNotFoundException: Slug (ou capital do estado) desconhecido
            WeatherDataNotFoundException: Nenhuma estação da capital com dados
        """
        pass


class IGetCoordinatesWeatherUseCase(ABC):

    @abstractmethod
    async def execute(self, coordinates: Coordinates) -> WeatherResponse:
        pass


class IGetStateWeatherUseCase(ABC):

    @abstractmethod
    async def execute(self, state_code: str) -> StateWeatherResponse:
        """
        Raises:
            InvalidParameterException: UF desconhecida
            WeatherDataNotFoundException: Nenhuma estação automática no estado
        """
        pass


class IGetStationsUseCase(ABC):

    @abstractmethod
    async def execute(self) -> StationsResponse:
        pass


class IGetAlertsUseCase(ABC):

    @abstractmethod
    async def execute(self) -> AlertsResponse:
        pass


class IGeocodeCityUseCase(ABC):

    @abstractmethod
    async def execute(self, request: GeocodeRequest) -> GeocodeResponse:
        """
        Raises:
            LocationNotFoundException: Nenhum resultado no Brasil
        """
        pass


class IGetRadarFramesUseCase(ABC):

    @abstractmethod
    async def execute(self) -> RadarResponse:
        pass
