"""
Weather Reading Builder - Normaliza dados brutos em NormalizedWeatherReading

Pipeline: janela de 24h -> agregação de chuva -> classificação -> status
"""
from datetime import datetime, timedelta
from typing import Iterable, List, Optional, Sequence

from domain.alerts.primitives import StationStatus
from domain.constants import App
from domain.entities.observation import StationObservation
from domain.entities.point_forecast import PointForecast
from domain.entities.station import Station
from domain.entities.weather_reading import NormalizedWeatherReading
from domain.helpers.rounding import round_half_away, round_int
from domain.services.alert_classifier import AlertClassifier
from domain.services.rain_aggregator import RainAggregator
from domain.services.reading_quality_checker import ReadingQualityChecker
from domain.services.station_status_resolver import StationStatusResolver
from domain.value_objects.measurements import MeasurementRange, Wind
from shared.config.logger_config import get_logger

logger = get_logger(child=True)

OBSERVATION_WINDOW = timedelta(hours=App.OBSERVATION_WINDOW_HOURS)


def _present(values: Iterable[Optional[float]]) -> List[float]:
    return [v for v in values if v is not None]


def _range(current: Optional[float], lows: Sequence[float], highs: Sequence[float], digits: int = 1) -> MeasurementRange:
    """Mín/máx da janela; sem extremos reportados, usa o valor instantâneo"""
    current_value = current if current is not None else 0.0
    low = min(lows) if lows else current_value
    high = max(highs) if highs else current_value
    if digits == 0:
        return MeasurementRange(round_int(current_value), round_int(low), round_int(high))
    return MeasurementRange(
        round_half_away(current_value, digits),
        round_half_away(low, digits),
        round_half_away(high, digits)
    )


class WeatherReadingBuilder:
    """Montagem das leituras normalizadas a partir dos dois formatos brutos"""

    @staticmethod
    def within_window(
        observations: Iterable[StationObservation],
        now: datetime
    ) -> List[StationObservation]:
        """
        Restringe à janela (now-24h, now] e descarta linhas sem nenhuma medição,
        em ordem cronológica
        """
        window_start = now - OBSERVATION_WINDOW
        kept = [
            obs for obs in observations
            if window_start < obs.observed_at <= now and obs.has_measurements()
        ]
        return sorted(kept, key=lambda obs: obs.observed_at)

    @staticmethod
    def from_observations(
        station: Station,
        observations: Iterable[StationObservation],
        now: datetime
    ) -> Optional[NormalizedWeatherReading]:
        """
        Constrói a leitura de uma estação a partir das observações do INMET

        Returns:
            Leitura normalizada ou None quando não há observações na janela
            (a estação é omitida da saída, não reportada com zeros)
        """
        window = WeatherReadingBuilder.within_window(observations, now)
        rain = RainAggregator.from_observations(window, now)
        if rain is None:
            return None

        latest = window[-1]

        temperature = _range(
            latest.temperature,
            _present(o.temperature_min for o in window) + _present(o.temperature for o in window),
            _present(o.temperature_max for o in window) + _present(o.temperature for o in window)
        )
        humidity = _range(
            latest.humidity,
            _present(o.humidity_min for o in window) + _present(o.humidity for o in window),
            _present(o.humidity_max for o in window) + _present(o.humidity for o in window),
            digits=0
        )
        wind = Wind(
            speed=round_half_away(latest.wind_speed),
            direction=round_int(latest.wind_direction),
            gust=round_half_away(latest.wind_gust)
        )

        return WeatherReadingBuilder._assemble(
            station_id=station.code,
            station_name=station.name,
            state=station.state,
            coordinates=station.coordinates,
            timestamp=latest.observed_at,
            rain=rain,
            temperature=temperature,
            humidity=humidity,
            wind=wind,
            pressure=round_half_away(latest.pressure),
            status=StationStatusResolver.resolve(latest.observed_at, now)
        )

    @staticmethod
    def from_point_forecast(
        station_id: str,
        station_name: str,
        state: str,
        forecast: PointForecast,
        now: datetime,
        coordinates=None,
        broken: bool = False
    ) -> NormalizedWeatherReading:
        """
        Constrói a leitura a partir de condições atuais + série horária

        Args:
            broken: estação em pane no catálogo; força status OFFLINE
        """
        rain = RainAggregator.from_hourly_series(
            forecast.hourly_precipitation,
            forecast.precipitation
        )

        temps = _present(forecast.hourly_temperature[-24:])
        humidities = _present(forecast.hourly_humidity[-24:])

        if broken:
            status = StationStatus.OFFLINE
        else:
            status = StationStatusResolver.resolve(forecast.observed_at, now)

        return WeatherReadingBuilder._assemble(
            station_id=station_id,
            station_name=station_name,
            state=state,
            coordinates=coordinates,
            timestamp=forecast.observed_at,
            rain=rain,
            temperature=_range(forecast.temperature, temps, temps),
            humidity=_range(forecast.humidity, humidities, humidities, digits=0),
            wind=Wind(
                speed=round_half_away(forecast.wind_speed),
                direction=round_int(forecast.wind_direction),
                gust=round_half_away(forecast.wind_gust)
            ),
            pressure=round_half_away(forecast.pressure),
            status=status
        )

    @staticmethod
    def _assemble(station_id, station_name, state, coordinates, timestamp, rain,
                  temperature, humidity, wind, pressure, status) -> NormalizedWeatherReading:
        warnings = ReadingQualityChecker.check(rain)
        if warnings:
            logger.warning(
                "Acumulados de chuva inconsistentes",
                station_id=station_id,
                warnings=list(warnings),
                last30min=rain.last_30min,
                last1h=rain.last_1h,
                last24h=rain.last_24h
            )

        return NormalizedWeatherReading(
            station_id=station_id,
            station_name=station_name,
            state=state,
            coordinates=coordinates,
            timestamp=timestamp,
            rain=rain,
            temperature=temperature,
            humidity=humidity,
            wind=wind,
            pressure=pressure,
            status=status,
            alert_level=AlertClassifier.classify(rain.last_1h, rain.last_24h, wind.gust),
            quality_warnings=warnings
        )
