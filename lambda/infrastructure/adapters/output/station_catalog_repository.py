"""
Repositório do catálogo estático de estações monitoradas
Índices construídos uma vez e reutilizados entre invocações Lambda
"""
from typing import Dict, List, Optional

from application.ports.output.station_catalog_port import IStationCatalog
from domain.constants import Monitoring
from domain.entities.location import Capital, StateInfo
from domain.entities.station import Station
from domain.value_objects.coordinates import Coordinates
from infrastructure.adapters.output.data.brazil_catalog import (
    BRAZILIAN_CAPITALS,
    BRAZILIAN_STATES,
    MONITORED_STATIONS,
)


class StaticStationCatalog(IStationCatalog):
    """Catálogo em memória com lookup O(1) por código, slug e UF"""

    def __init__(
        self,
        states: Dict[str, dict] = None,
        capitals: Dict[str, dict] = None,
        stations: Dict[str, dict] = None
    ):
        states = BRAZILIAN_STATES if states is None else states
        capitals = BRAZILIAN_CAPITALS if capitals is None else capitals
        stations = MONITORED_STATIONS if stations is None else stations

        self._states: Dict[str, StateInfo] = {
            code: StateInfo(code=code, name=data['name'], region=data['region'], capital=data['capital'])
            for code, data in states.items()
        }
        self._stations: Dict[str, Station] = {
            code: self._station_from_dict(code, data)
            for code, data in stations.items()
        }
        self._capitals: Dict[str, Capital] = {
            slug: self._capital_from_dict(slug, data)
            for slug, data in capitals.items()
        }
        self._capital_by_state: Dict[str, Capital] = {
            capital.state_code: capital for capital in self._capitals.values()
        }

    def _station_from_dict(self, code: str, data: dict) -> Station:
        state = self._states.get(data['state'])
        return Station(
            code=code,
            name=data['name'],
            state=data['state'],
            coordinates=Coordinates(latitude=data['latitude'], longitude=data['longitude']),
            city=data.get('city', data['name']),
            region=state.region if state else '',
            situation='Operante',
            station_type=Monitoring.AUTOMATIC_STATION_TYPE
        )

    def _capital_from_dict(self, slug: str, data: dict) -> Capital:
        state = self._states.get(data['state_code'])
        return Capital(
            slug=slug,
            name=data['name'],
            state=state.name if state else data['state_code'],
            state_code=data['state_code'],
            region=state.region if state else '',
            coordinates=Coordinates(latitude=data['latitude'], longitude=data['longitude']),
            stations=tuple(data.get('stations', ()))
        )

    def get_station(self, code: str) -> Optional[Station]:
        return self._stations.get(code.upper())

    def get_capital(self, slug: str) -> Optional[Capital]:
        return self._capitals.get(slug.lower())

    def get_capital_by_state(self, state_code: str) -> Optional[Capital]:
        return self._capital_by_state.get(state_code.upper())

    def get_state(self, state_code: str) -> Optional[StateInfo]:
        return self._states.get(state_code.upper())

    def stations_for_capital(self, slug: str) -> List[Station]:
        capital = self.get_capital(slug)
        if capital is None:
            return []
        return [self._stations[code] for code in capital.stations if code in self._stations]


# Singleton global - carregado uma vez e reutilizado entre invocações Lambda
_catalog_instance = None


def get_station_catalog() -> StaticStationCatalog:
    """Retorna instância singleton do catálogo"""
    global _catalog_instance

    if _catalog_instance is None:
        _catalog_instance = StaticStationCatalog()

    return _catalog_instance
