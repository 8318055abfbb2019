"""
Alert Synthesizer - Gera alertas a partir das leituras das estações
Usado quando o feed de avisos do INMET não retorna nada
"""
from typing import Iterable, List, Optional, Tuple

from domain.alerts.primitives import AlertLevel, AlertType
from domain.constants import Sources, Thresholds
from domain.entities.alert import AlertRecord
from domain.entities.weather_reading import NormalizedWeatherReading
from domain.helpers.rounding import format_number


class AlertSynthesizer:
    """Um AlertRecord por estação com nível diferente de normal"""

    @staticmethod
    def describe(rain_1h: float, rain_24h: float, wind_gust: float) -> Tuple[str, AlertType]:
        """
        Mensagem e tipo pelo limiar excedido (24h > intensa > moderada);
        rajada >= 60 km/h acrescenta aviso de vento e troca o tipo para WIND
        """
        message = ""
        alert_type = AlertType.RAIN

        if rain_24h >= Thresholds.RAIN_24H_SEVERE:
            message = f"Acumulado de {format_number(rain_24h)}mm em 24h. Risco de alagamentos."
            alert_type = AlertType.FLOOD
        elif rain_1h >= Thresholds.RAIN_1H_SEVERE:
            message = f"Chuva intensa: {format_number(rain_1h)}mm na última hora."
        elif rain_1h >= Thresholds.RAIN_1H_ATTENTION:
            message = f"Chuva moderada: {format_number(rain_1h)}mm na última hora. Monitorando."

        if wind_gust >= Thresholds.WIND_GUST_ALERT:
            message += f" Rajadas de vento de {format_number(wind_gust)}km/h."
            alert_type = AlertType.WIND

        return message.strip(), alert_type

    @staticmethod
    def build(
        station_id: str,
        station_name: str,
        level: AlertLevel,
        start_time: str,
        rain_1h: float,
        rain_24h: float,
        wind_gust: float
    ) -> Optional[AlertRecord]:
        """
        Returns:
            AlertRecord, ou None para nível normal / sem limiar de chuva excedido
        """
        if level is AlertLevel.NORMAL:
            return None

        message, alert_type = AlertSynthesizer.describe(rain_1h, rain_24h, wind_gust)
        if not message:
            return None

        return AlertRecord(
            id=f"gen-{station_id}",
            region=station_name,
            level=level,
            type=alert_type,
            message=message,
            start_time=start_time,
            source=Sources.CALCULATED,
            rain_1h=rain_1h,
            rain_24h=rain_24h
        )

    @staticmethod
    def from_reading(reading: NormalizedWeatherReading) -> Optional[AlertRecord]:
        return AlertSynthesizer.build(
            station_id=reading.station_id,
            station_name=reading.station_name,
            level=reading.alert_level,
            start_time=reading.timestamp.isoformat(),
            rain_1h=reading.rain.last_1h,
            rain_24h=reading.rain.last_24h,
            wind_gust=reading.wind.gust
        )

    @staticmethod
    def from_readings(readings: Iterable[NormalizedWeatherReading]) -> List[AlertRecord]:
        alerts = []
        for reading in readings:
            alert = AlertSynthesizer.from_reading(reading)
            if alert is not None:
                alerts.append(alert)
        return alerts
