"""Response DTOs - Contratos de saída dos use cases"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from domain.entities.alert import AlertRecord
from domain.entities.location import GeocodedLocation
from domain.entities.radar import RadarFrames
from domain.entities.station import Station
from domain.entities.weather_reading import NormalizedWeatherReading


def _cache_flags(response: Dict[str, Any], cached: bool, stale: bool) -> Dict[str, Any]:
    if cached:
        response['cached'] = True
    if stale:
        response['stale'] = True
    return response


@dataclass
class WeatherResponse:
    """Leituras de /api/weather (estação, capital ou coordenadas)"""
    readings: List[NormalizedWeatherReading]
    source: str
    timestamp: str
    location: Optional[Dict[str, Any]] = None
    cached: bool = False
    stale: bool = False

    def to_api_response(self) -> Dict[str, Any]:
        response: Dict[str, Any] = {
            'data': [reading.to_api_response() for reading in self.readings],
            'total': len(self.readings),
        }
        if self.location is not None:
            response['location'] = self.location
        response['source'] = self.source
        return _cache_flags(response, self.cached, self.stale)


@dataclass
class StateWeatherResponse:
    """Leituras de todas as estações automáticas de um estado"""
    readings: List[NormalizedWeatherReading]
    total_stations_in_state: int
    state: str
    source: str
    stations_source: str
    timestamp: str
    cached: bool = False
    stale: bool = False

    def to_api_response(self) -> Dict[str, Any]:
        response = {
            'data': [reading.to_api_response() for reading in self.readings],
            'total': len(self.readings),
            'totalStationsInState': self.total_stations_in_state,
            'state': self.state,
            'source': self.source,
            'stationsSource': self.stations_source,
        }
        return _cache_flags(response, self.cached, self.stale)


@dataclass
class StationsResponse:
    stations: List[Station]
    timestamp: str
    cached: bool = False
    stale: bool = False
    error: Optional[str] = None

    def to_api_response(self) -> Dict[str, Any]:
        response: Dict[str, Any] = {
            'data': [station.to_api_response() for station in self.stations],
            'total': len(self.stations),
            'cached': self.cached,
        }
        if self.stale:
            response['stale'] = True
        if self.error:
            response['error'] = self.error
        return response


@dataclass
class AlertsResponse:
    alerts: List[AlertRecord]
    summary: Dict[str, int]
    timestamp: str
    cached: bool = False
    stale: bool = False

    def to_api_response(self) -> Dict[str, Any]:
        response = {
            'data': [alert.to_api_response() for alert in self.alerts],
            'total': len(self.alerts),
            'summary': dict(self.summary),
        }
        return _cache_flags(response, self.cached, self.stale)


@dataclass
class GeocodeResponse:
    results: List[GeocodedLocation]
    query: str
    timestamp: str

    def to_api_response(self) -> Dict[str, Any]:
        return {
            'results': [location.to_api_response() for location in self.results],
            'query': self.query,
        }


@dataclass
class RadarResponse:
    frames: RadarFrames
    timestamp: str
    cached: bool = False
    stale: bool = False

    def to_api_response(self) -> Dict[str, Any]:
        response = {'data': self.frames.to_api_response()}
        return _cache_flags(response, self.cached, self.stale)
