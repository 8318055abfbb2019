"""Input Ports - Interfaces dos casos de uso"""
from .use_case_ports import (
    IGetStationWeatherUseCase,
    IGetCapitalWeatherUseCase,
    IGetCoordinatesWeatherUseCase,
    IGetStateWeatherUseCase,
    IGetStationsUseCase,
    IGetAlertsUseCase,
    IGeocodeCityUseCase,
    IGetRadarFramesUseCase,
)
