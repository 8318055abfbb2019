"""Application DTOs - Data Transfer Objects para contratos de API"""

from application.dtos.requests import GetWeatherRequest, GeocodeRequest
from application.dtos.responses import (
    WeatherResponse,
    StateWeatherResponse,
    StationsResponse,
    AlertsResponse,
    GeocodeResponse,
    RadarResponse
)

__all__ = [
    'GetWeatherRequest',
    'GeocodeRequest',
    'WeatherResponse',
    'StateWeatherResponse',
    'StationsResponse',
    'AlertsResponse',
    'GeocodeResponse',
    'RadarResponse'
]
