"""
Output Port: Geocodificação de cidades
"""
from abc import ABC, abstractmethod
from typing import List

from domain.entities.location import GeocodedLocation


class IGeocodingProvider(ABC):

    @abstractmethod
    async def search(self, query: str) -> List[GeocodedLocation]:
        """Resultados brutos (qualquer país), na ordem de relevância"""
        pass
