"""
Location Entities - Capitais, estados e localidades geocodificadas
"""
from dataclasses import dataclass
from typing import Optional, Tuple

from domain.value_objects.coordinates import Coordinates


@dataclass(frozen=True)
class StateInfo:
    """Unidade federativa"""
    code: str  # UF
    name: str
    region: str
    capital: str

    def to_api_response(self) -> dict:
        return {
            'code': self.code,
            'name': self.name,
            'region': self.region,
            'capital': self.capital
        }

    def to_location_response(self) -> dict:
        return {'type': 'state', **self.to_api_response()}


@dataclass(frozen=True)
class Capital:
    """Capital estadual com as estações INMET monitoradas"""
    slug: str
    name: str
    state: str  # nome do estado
    state_code: str
    region: str
    coordinates: Coordinates
    stations: Tuple[str, ...]

    def to_location_response(self, location_type: str = 'capital') -> dict:
        return {
            'type': location_type,
            'name': self.name,
            'state': self.state,
            'stateCode': self.state_code,
            'region': self.region
        }


@dataclass(frozen=True)
class GeocodedLocation:
    """Resultado de geocodificação restrito ao Brasil"""
    name: str
    state: str
    country: str
    coordinates: Coordinates
    population: int = 0
    elevation: float = 0.0
    country_code: str = ""

    @property
    def is_brazilian(self) -> bool:
        return self.country_code.upper() == "BR" or self.country in ("Brasil", "Brazil")

    def to_api_response(self) -> dict:
        return {
            'name': self.name,
            'state': self.state,
            'country': self.country,
            'latitude': self.coordinates.latitude,
            'longitude': self.coordinates.longitude,
            'population': self.population,
            'elevation': self.elevation
        }
