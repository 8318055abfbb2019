"""
Configurações e fixtures compartilhadas para testes unitários
"""
from datetime import datetime, timedelta, timezone

import pytest

from domain.alerts.primitives import AlertLevel, AlertType, StationStatus
from domain.entities.alert import AlertRecord
from domain.entities.observation import StationObservation
from domain.entities.point_forecast import PointForecast
from domain.entities.station import Station
from domain.entities.weather_reading import NormalizedWeatherReading
from domain.value_objects.coordinates import Coordinates
from domain.value_objects.measurements import MeasurementRange, Wind
from domain.value_objects.rain_aggregates import RainAggregates

NOW = datetime(2025, 1, 15, 18, 0, tzinfo=timezone.utc)


class FakeClock:
    """Relógio controlável (epoch em segundos) para TtlCache"""

    def __init__(self, start: float = 1_736_964_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def make_station():
    """
    Factory fixture para criar Station com valores padrão

    Usage:
        def test_something(make_station):
            station = make_station(code='A652', state='RJ')
    """
    def _make(
        code: str = 'A701',
        name: str = 'São Paulo - Mirante de Santana',
        state: str = 'SP',
        latitude: float = -23.4963,
        longitude: float = -46.62,
        situation: str = 'Operante',
        station_type: str = 'Automatica'
    ) -> Station:
        coordinates = None
        if latitude is not None and longitude is not None:
            coordinates = Coordinates(latitude=latitude, longitude=longitude)
        return Station(
            code=code,
            name=name,
            state=state,
            coordinates=coordinates,
            city=name,
            situation=situation,
            station_type=station_type
        )

    return _make


@pytest.fixture
def make_observation():
    """Factory de StationObservation `minutes_ago` minutos antes de NOW"""
    def _make(minutes_ago: float = 0, precipitation=0.0, **fields) -> StationObservation:
        defaults = dict(
            temperature=25.0,
            humidity=70.0,
            wind_speed=10.0,
            wind_direction=180.0,
            wind_gust=20.0,
            pressure=1013.0,
        )
        defaults.update(fields)
        return StationObservation(
            station_code='A701',
            observed_at=NOW - timedelta(minutes=minutes_ago),
            precipitation=precipitation,
            **defaults
        )

    return _make


@pytest.fixture
def make_point_forecast():
    def _make(
        hourly_precipitation=(0.0,) * 25,
        precipitation: float = 0.0,
        observed_at: datetime = NOW,
        wind_gust: float = 15.0,
        **fields
    ) -> PointForecast:
        return PointForecast(
            latitude=-23.55,
            longitude=-46.63,
            observed_at=observed_at,
            precipitation=precipitation,
            temperature=fields.get('temperature', 24.0),
            humidity=fields.get('humidity', 80.0),
            wind_speed=fields.get('wind_speed', 12.0),
            wind_direction=fields.get('wind_direction', 90.0),
            wind_gust=wind_gust,
            pressure=fields.get('pressure', 1012.0),
            hourly_precipitation=tuple(hourly_precipitation),
            hourly_temperature=tuple(fields.get('hourly_temperature', (20.0, 24.0, 28.0))),
            hourly_humidity=tuple(fields.get('hourly_humidity', (60.0, 80.0, 95.0)))
        )

    return _make


@pytest.fixture
def make_reading():
    def _make(
        station_id: str = 'A701',
        station_name: str = 'São Paulo - Mirante de Santana',
        rain_1h: float = 0.0,
        rain_24h: float = 0.0,
        wind_gust: float = 10.0,
        alert_level: AlertLevel = AlertLevel.NORMAL,
        timestamp: datetime = NOW
    ) -> NormalizedWeatherReading:
        return NormalizedWeatherReading(
            station_id=station_id,
            station_name=station_name,
            state='SP',
            coordinates=Coordinates(-23.4963, -46.62),
            timestamp=timestamp,
            rain=RainAggregates(current=rain_1h, last_30min=rain_1h / 2, last_1h=rain_1h, last_24h=rain_24h),
            temperature=MeasurementRange(25.0, 20.0, 28.0),
            humidity=MeasurementRange(70, 60, 90),
            wind=Wind(speed=10.0, direction=180, gust=wind_gust),
            pressure=1013.0,
            status=StationStatus.ONLINE,
            alert_level=alert_level
        )

    return _make


@pytest.fixture
def make_alert():
    def _make(alert_id: str = 'a1', level: AlertLevel = AlertLevel.ALERT, source: str = 'INMET') -> AlertRecord:
        return AlertRecord(
            id=alert_id,
            region='SP',
            level=level,
            type=AlertType.RAIN,
            message='Chuva forte',
            start_time='2025-01-15T15:00:00-03:00',
            source=source
        )

    return _make
