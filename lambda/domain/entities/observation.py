"""
Observation Entity - Leitura bruta de uma estação (efêmera, nunca persistida)
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class StationObservation:
    """
    Observação horária de uma estação automática

    Todas as grandezas podem ser None (sensor sem leitura).
    Vento já convertido para km/h na fronteira do provider.
    """
    station_code: str
    observed_at: datetime  # UTC, timezone-aware
    temperature: Optional[float] = None
    temperature_min: Optional[float] = None
    temperature_max: Optional[float] = None
    humidity: Optional[float] = None
    humidity_min: Optional[float] = None
    humidity_max: Optional[float] = None
    precipitation: Optional[float] = None  # mm desde a leitura anterior
    wind_speed: Optional[float] = None  # km/h
    wind_direction: Optional[float] = None  # graus
    wind_gust: Optional[float] = None  # km/h
    pressure: Optional[float] = None  # hPa
    pressure_min: Optional[float] = None
    pressure_max: Optional[float] = None

    def has_measurements(self) -> bool:
        """
        INMET publica as horas futuras do dia com todos os campos nulos;
        uma linha só conta como observação se algum sensor reportou.
        """
        return any(
            value is not None
            for value in (
                self.temperature,
                self.humidity,
                self.precipitation,
                self.wind_speed,
                self.pressure,
            )
        )
