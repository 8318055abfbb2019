"""
INMET Mappers - Schemas validados -> entidades de domínio
"""
import hashlib
from typing import Iterable, Optional

from domain.alerts.primitives import AlertLevel, AlertType
from domain.constants import Sources
from domain.entities.alert import AlertRecord
from domain.entities.observation import StationObservation
from domain.entities.station import Station
from domain.value_objects.coordinates import Coordinates
from infrastructure.adapters.output.data.brazil_catalog import BRAZILIAN_STATES
from infrastructure.adapters.output.providers.inmet.schemas import (
    InmetAlertSchema,
    InmetObservationSchema,
    InmetStationSchema,
)
from shared.utils.datetime_parser import DateTimeParser

MS_TO_KMH = 3.6

_SEVERE_TERMS = ('grande', 'muito alto', 'extremo')
_ALERT_TERMS = ('alto', 'moderado')

# Ordem importa: a primeira regra que casar define o tipo
_TYPE_RULES = (
    (('chuva', 'precipitação'), AlertType.RAIN),
    (('alagamento', 'inundação'), AlertType.FLOOD),
    (('tempestade', 'raio'), AlertType.STORM),
    (('vento', 'vendaval'), AlertType.WIND),
)


def _to_kmh(value: Optional[float]) -> Optional[float]:
    return value * MS_TO_KMH if value is not None else None


class InmetMapper:

    @staticmethod
    def to_station(schema: InmetStationSchema) -> Station:
        coordinates = None
        if schema.latitude is not None and schema.longitude is not None:
            coordinates = Coordinates(latitude=schema.latitude, longitude=schema.longitude)

        return Station(
            code=schema.code.upper(),
            name=schema.name,
            state=schema.state.upper(),
            coordinates=coordinates,
            city=schema.name,
            region=BRAZILIAN_STATES.get(schema.state.upper(), {}).get('region', ''),
            altitude=schema.altitude,
            situation=schema.situation or "",
            station_type=schema.station_type or "",
            operating_since=schema.operating_since
        )

    @staticmethod
    def to_observation(schema: InmetObservationSchema, station_code: str) -> StationObservation:
        """
        Raises:
            ValueError: DT_MEDICAO/HR_MEDICAO em formato inválido
        """
        return StationObservation(
            station_code=(schema.station_code or station_code).upper(),
            observed_at=DateTimeParser.parse_inmet(schema.date, schema.hour),
            temperature=schema.temperature,
            temperature_min=schema.temperature_min,
            temperature_max=schema.temperature_max,
            humidity=schema.humidity,
            humidity_min=schema.humidity_min,
            humidity_max=schema.humidity_max,
            precipitation=schema.precipitation,
            wind_speed=_to_kmh(schema.wind_speed),
            wind_direction=schema.wind_direction,
            wind_gust=_to_kmh(schema.wind_gust),
            pressure=schema.pressure,
            pressure_min=schema.pressure_min,
            pressure_max=schema.pressure_max
        )

    @staticmethod
    def map_severity(severity: Optional[str]) -> AlertLevel:
        """
        Examples:
            "Grande Perigo" -> SEVERE, "Perigo Potencial" -> ATTENTION
        """
        lower = (severity or 'moderado').lower()
        if any(term in lower for term in _SEVERE_TERMS):
            return AlertLevel.SEVERE
        if any(term in lower for term in _ALERT_TERMS):
            return AlertLevel.ALERT
        return AlertLevel.ATTENTION

    @staticmethod
    def map_alert_type(description: Optional[str]) -> AlertType:
        lower = (description or '').lower()
        for terms, alert_type in _TYPE_RULES:
            if any(term in lower for term in terms):
                return alert_type
        return AlertType.RAIN

    @staticmethod
    def to_alert(schema: InmetAlertSchema, monitored_states: Iterable[str], now_iso: str) -> Optional[AlertRecord]:
        """
        Returns:
            AlertRecord, ou None se o aviso não afeta nenhum estado monitorado
        """
        monitored = {state.upper() for state in monitored_states}
        if not any(state.upper() in monitored for state in schema.states):
            return None

        description = schema.description or ''
        if schema.id is not None:
            alert_id = str(schema.id)
        else:
            digest = hashlib.sha1(f"{description}|{schema.start}|{','.join(schema.states)}".encode()).hexdigest()
            alert_id = f"inmet-{digest[:9]}"

        return AlertRecord(
            id=alert_id,
            region=', '.join(schema.states),
            level=InmetMapper.map_severity(schema.severity),
            type=InmetMapper.map_alert_type(description),
            message=description or 'Alerta meteorológico ativo',
            start_time=schema.start or now_iso,
            source=Sources.INMET,
            end_time=schema.end,
            rain_1h=schema.rain_1h,
            rain_24h=schema.rain_24h
        )
