"""Feed interno (leituras da própria API)"""
from infrastructure.adapters.output.providers.internal.weather_feed_alert_source import WeatherFeedAlertSource

__all__ = ['WeatherFeedAlertSource']
