"""
Output Port: Catálogo estático de estados, capitais e estações monitoradas
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from domain.entities.location import Capital, StateInfo
from domain.entities.station import Station


class IStationCatalog(ABC):

    @abstractmethod
    def get_station(self, code: str) -> Optional[Station]:
        pass

    @abstractmethod
    def get_capital(self, slug: str) -> Optional[Capital]:
        pass

    @abstractmethod
    def get_capital_by_state(self, state_code: str) -> Optional[Capital]:
        pass

    @abstractmethod
    def get_state(self, state_code: str) -> Optional[StateInfo]:
        pass

    @abstractmethod
    def stations_for_capital(self, slug: str) -> List[Station]:
        """Estações monitoradas da capital, na ordem do catálogo"""
        pass
