"""
NormalizedWeatherReading - Leitura normalizada exibida pelo painel
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Tuple
from zoneinfo import ZoneInfo

from domain.alerts.primitives import AlertLevel, StationStatus
from domain.constants import App
from domain.value_objects.coordinates import Coordinates
from domain.value_objects.measurements import MeasurementRange, Wind
from domain.value_objects.rain_aggregates import RainAggregates


@dataclass(frozen=True)
class NormalizedWeatherReading:
    """
    Entidade derivada de um ciclo de busca

    Criada nova a cada agregação bem-sucedida e nunca alterada:
    o próximo ciclo produz outra instância que substitui a do cache.
    """
    station_id: str
    station_name: str
    state: str
    coordinates: Optional[Coordinates]
    timestamp: datetime
    rain: RainAggregates
    temperature: MeasurementRange
    humidity: MeasurementRange
    wind: Wind
    pressure: float
    status: StationStatus
    alert_level: AlertLevel
    quality_warnings: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_alerting(self) -> bool:
        return self.alert_level is not AlertLevel.NORMAL

    def to_api_response(self) -> dict:
        """
        Converte para formato de resposta da API

        Timestamp convertido para America/Sao_Paulo (mesma convenção
        das demais rotas do painel).
        """
        brasil_tz = ZoneInfo(App.TIMEZONE)
        if self.timestamp.tzinfo is not None:
            timestamp_brasil = self.timestamp.astimezone(brasil_tz)
        else:
            timestamp_brasil = self.timestamp.replace(tzinfo=ZoneInfo("UTC")).astimezone(brasil_tz)

        response = {
            'stationId': self.station_id,
            'stationName': self.station_name,
            'state': self.state,
            'coordinates': self.coordinates.to_api_response() if self.coordinates else None,
            'timestamp': timestamp_brasil.isoformat(),
            'rain': self.rain.to_api_response(),
            'temperature': self.temperature.to_api_response(),
            'humidity': self.humidity.to_api_response(),
            'wind': self.wind.to_api_response(),
            'pressure': self.pressure,
            'status': self.status.value,
            'alertLevel': self.alert_level.value
        }

        if self.quality_warnings:
            response['qualityWarnings'] = list(self.quality_warnings)

        return response
