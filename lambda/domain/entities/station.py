"""
Station Entity - Estação meteorológica do INMET
"""
from dataclasses import dataclass
from typing import Optional

from domain.value_objects.coordinates import Coordinates


@dataclass(frozen=True)
class Station:
    """Entidade Estação"""
    code: str  # Código INMET (ex: "A701")
    name: str
    state: str  # UF
    coordinates: Optional[Coordinates] = None
    city: str = ""
    region: str = ""  # Macrorregião do IBGE (ex: "Sudeste")
    altitude: Optional[float] = None
    situation: str = ""  # "Operante", "Pane", ...
    station_type: str = ""  # "Automatica" / "Convencional"
    operating_since: Optional[str] = None

    @property
    def is_automatic(self) -> bool:
        return self.station_type == "Automatica"

    @property
    def is_broken(self) -> bool:
        """Estação reportada em pane pelo catálogo do INMET"""
        return self.situation == "Pane"

    def to_api_response(self) -> dict:
        """Converte para formato de resposta da API"""
        return {
            'code': self.code,
            'name': self.name,
            'city': self.city,
            'state': self.state,
            'region': self.region,
            'latitude': self.coordinates.latitude if self.coordinates else None,
            'longitude': self.coordinates.longitude if self.coordinates else None,
            'altitude': self.altitude,
            'situation': self.situation,
            'type': self.station_type,
            'operatingSince': self.operating_since
        }
