"""
Primitivos de alertas (níveis, tipos e status) compartilhados pelo domínio.
Separados para evitar ciclos entre serviços e entidades.
"""
from __future__ import annotations

from enum import Enum


class AlertLevel(Enum):
    """Níveis de severidade derivados da precipitação"""
    NORMAL = "normal"
    ATTENTION = "attention"
    ALERT = "alert"
    SEVERE = "severe"

    @property
    def rank(self) -> int:
        """Ordem de exibição: severe(0) < alert(1) < attention(2) < normal(3)"""
        return _LEVEL_RANK[self]


_LEVEL_RANK = {
    AlertLevel.SEVERE: 0,
    AlertLevel.ALERT: 1,
    AlertLevel.ATTENTION: 2,
    AlertLevel.NORMAL: 3,
}


class AlertType(Enum):
    """Tipo de fenômeno do alerta"""
    RAIN = "rain"
    FLOOD = "flood"
    STORM = "storm"
    WIND = "wind"


class StationStatus(Enum):
    """Situação da estação pela recência da última observação"""
    ONLINE = "online"
    DELAYED = "delayed"
    OFFLINE = "offline"
