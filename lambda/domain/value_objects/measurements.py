"""
Value Objects: grandezas instantâneas com mínimo/máximo e vento
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class MeasurementRange:
    """Valor instantâneo com mínimo e máximo na janela (temperatura, umidade)"""
    current: float
    min: float
    max: float

    def to_api_response(self) -> dict:
        return {'current': self.current, 'min': self.min, 'max': self.max}


@dataclass(frozen=True)
class Wind:
    """Vento em km/h, direção em graus"""
    speed: float
    direction: int
    gust: float

    def to_api_response(self) -> dict:
        return {'speed': self.speed, 'direction': self.direction, 'gust': self.gust}
