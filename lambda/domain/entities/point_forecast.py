"""
PointForecast Entity - Condições atuais + série horária de um ponto (Open-Meteo)
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Tuple


@dataclass(frozen=True)
class PointForecast:
    """
    Dados de modelo para uma coordenada

    As séries horárias cobrem as últimas 24h mais a hora corrente,
    em ordem cronológica; valores ausentes vêm como None.
    """
    latitude: float
    longitude: float
    observed_at: datetime  # timezone-aware
    precipitation: Optional[float] = None
    temperature: Optional[float] = None
    humidity: Optional[float] = None
    wind_speed: Optional[float] = None  # km/h
    wind_direction: Optional[float] = None
    wind_gust: Optional[float] = None  # km/h
    pressure: Optional[float] = None
    hourly_precipitation: Tuple[Optional[float], ...] = field(default_factory=tuple)
    hourly_temperature: Tuple[Optional[float], ...] = field(default_factory=tuple)
    hourly_humidity: Tuple[Optional[float], ...] = field(default_factory=tuple)
