"""Application Use Cases - 100% ASYNC com providers desacoplados"""
from .get_station_weather_use_case import GetStationWeatherUseCase
from .get_capital_weather_use_case import GetCapitalWeatherUseCase
from .get_coordinates_weather_use_case import GetCoordinatesWeatherUseCase
from .get_state_weather_use_case import GetStateWeatherUseCase
from .get_stations_use_case import GetStationsUseCase
from .get_alerts_use_case import GetAlertsUseCase
from .geocode_city_use_case import GeocodeCityUseCase
from .get_radar_frames_use_case import GetRadarFramesUseCase

__all__ = [
    'GetStationWeatherUseCase',
    'GetCapitalWeatherUseCase',
    'GetCoordinatesWeatherUseCase',
    'GetStateWeatherUseCase',
    'GetStationsUseCase',
    'GetAlertsUseCase',
    'GeocodeCityUseCase',
    'GetRadarFramesUseCase'
]
