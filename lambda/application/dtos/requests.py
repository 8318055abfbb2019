"""Request DTOs - Contratos de entrada para use cases"""

from dataclasses import dataclass
from typing import Optional

from domain.value_objects.coordinates import Coordinates


@dataclass(frozen=True)
class GetWeatherRequest:
    """
    Seleção de /api/weather, em ordem de precedência:
    station > lat/lng > capital > state > capital padrão
    """
    station: Optional[str] = None
    coordinates: Optional[Coordinates] = None
    capital: Optional[str] = None
    state: Optional[str] = None


@dataclass(frozen=True)
class GeocodeRequest:
    """Busca de cidade (opcionalmente restrita a um estado)"""
    city: str
    state: Optional[str] = None

    @property
    def query(self) -> str:
        if self.state:
            return f"{self.city}, {self.state}, Brasil"
        return f"{self.city}, Brasil"
