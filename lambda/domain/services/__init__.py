"""
Domain Services - Serviços de lógica de negócio pura (sem conhecimento de APIs externas)

IMPORTANTE: Mappers de APIs externas → domain entities pertencem à infrastructure!
- infrastructure/adapters/output/providers/inmet/mappers.py
- infrastructure/adapters/output/providers/openmeteo/mappers/openmeteo_data_mapper.py
"""

from domain.services.alert_classifier import AlertClassifier, classify_alert_level
from domain.services.rain_aggregator import RainAggregator
from domain.services.station_status_resolver import StationStatusResolver, resolve_station_status
from domain.services.reading_quality_checker import ReadingQualityChecker
from domain.services.weather_reading_builder import WeatherReadingBuilder
from domain.services.alert_synthesizer import AlertSynthesizer
from domain.services.alert_aggregator import AlertAggregator, sort_alerts, summarize_alerts

__all__ = [
    'AlertClassifier',
    'classify_alert_level',
    'RainAggregator',
    'StationStatusResolver',
    'resolve_station_status',
    'ReadingQualityChecker',
    'WeatherReadingBuilder',
    'AlertSynthesizer',
    'AlertAggregator',
    'sort_alerts',
    'summarize_alerts'
]
