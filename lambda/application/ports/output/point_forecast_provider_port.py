"""
Output Port: Condições atuais + série horária por coordenada (Open-Meteo)
"""
from abc import ABC, abstractmethod
from typing import List, Sequence

from domain.entities.point_forecast import PointForecast
from domain.value_objects.coordinates import Coordinates


class IPointForecastProvider(ABC):

    @abstractmethod
    async def get_point_forecast(self, coordinates: Coordinates) -> PointForecast:
        pass

    @abstractmethod
    async def get_point_forecasts(self, coordinates: Sequence[Coordinates]) -> List[PointForecast]:
        """
        Uma única chamada para várias coordenadas

        Returns:
            Lista na mesma ordem das coordenadas
        """
        pass
