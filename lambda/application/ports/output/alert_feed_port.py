"""
Output Port: Fontes de alertas (avisos oficiais ou calculados)
"""
from abc import ABC, abstractmethod
from typing import List

from domain.entities.alert import AlertRecord


class IAlertSource(ABC):

    name: str = "alerts"

    @abstractmethod
    async def fetch_alerts(self) -> List[AlertRecord]:
        """
        Returns:
            Alertas ativos (lista vazia quando não há nenhum)

        Raises:
            UpstreamProviderException: Fonte indisponível
        """
        pass
