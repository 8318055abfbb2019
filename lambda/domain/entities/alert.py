"""
Alert Entity - Alerta exibido no painel (vindo do INMET ou calculado)
"""
from dataclasses import dataclass
from typing import Optional

from domain.alerts.primitives import AlertLevel, AlertType


@dataclass(frozen=True)
class AlertRecord:
    """Alerta meteorológico; regenerado a cada atualização do cache"""
    id: str
    region: str
    level: AlertLevel  # nunca NORMAL
    type: AlertType
    message: str
    start_time: str  # ISO 8601
    source: str
    end_time: Optional[str] = None
    rain_1h: Optional[float] = None
    rain_24h: Optional[float] = None

    def to_api_response(self) -> dict:
        """Converte para formato de resposta da API"""
        response = {
            'id': self.id,
            'region': self.region,
            'level': self.level.value,
            'type': self.type.value,
            'message': self.message,
            'startTime': self.start_time,
            'source': self.source
        }
        if self.end_time is not None:
            response['endTime'] = self.end_time
        if self.rain_1h is not None:
            response['rain1h'] = self.rain_1h
        if self.rain_24h is not None:
            response['rain24h'] = self.rain_24h
        return response
