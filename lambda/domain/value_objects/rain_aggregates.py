"""
Value Object: acumulados de chuva de uma estação
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class RainAggregates:
    """
    Acumulados de precipitação (mm) relativos ao instante de referência

    Todos os valores já chegam arredondados em 0.1 e não negativos.
    `last24h >= last1h >= last30min` é esperado mas não garantido
    (lacunas nos dados brutos podem violar a ordem).
    """
    current: float
    last_30min: float
    last_1h: float
    last_24h: float

    def to_api_response(self) -> dict:
        return {
            'current': self.current,
            'last30min': self.last_30min,
            'last1h': self.last_1h,
            'last24h': self.last_24h,
        }
